"""Token stream states.

This module defines the finite state machine states of the token stream.
"""

from __future__ import annotations

from enum import Enum, auto


class LexerState(Enum):
    """Token stream states.

    - IDLE: No token held back
    - BUFFERED: One token held back until the next character shows whether
      it has ended (always the case for a word run), or a read error held
      back behind the token flushed before it
    - EXHAUSTED: End of input or a read error was reached; nothing more
      will be produced

    """

    IDLE = auto()
    BUFFERED = auto()
    EXHAUSTED = auto()
