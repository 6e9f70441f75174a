"""ContextVar-based lexing configuration for rstlex.

Provides context-local configuration using Python's ContextVars (PEP 567).
Sources read the decoding settings when they are constructed; token streams
read the error policy when they are opened.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from rstlex.config import LexConfig, lex_config_context

    with lex_config_context(LexConfig(encoding="latin-1")):
        source = ReaderSource("legacy.rst", stream)

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class LexConfig:
    """Immutable lexing configuration.

    Attributes:
        encoding: Codec used by reader sources to decode bytes
        decode_errors: Codec error handler ("strict", "replace", ...)
        flush_on_error: Return a buffered token before raising a read error.
            When False the buffered token is dropped with the error.

    """

    encoding: str = "utf-8"
    decode_errors: str = "strict"
    flush_on_error: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "LexConfig":
        """Create LexConfig from dictionary.

        Only includes keys that are valid LexConfig fields; unknown keys
        are silently ignored.

        Args:
            config_dict: Dictionary with config values. Keys should match
                LexConfig attribute names.

        Returns:
            New LexConfig instance with values from dict.

        Example:
            >>> config = LexConfig.from_dict({
            ...     "encoding": "latin-1",
            ...     "unknown_key": "ignored",
            ... })
            >>> config.encoding
            'latin-1'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: LexConfig = LexConfig()

_lex_config: ContextVar[LexConfig] = ContextVar(
    "lex_config",
    default=_DEFAULT_CONFIG,
)


def get_lex_config() -> LexConfig:
    """Get current lexing configuration (context-local).

    Returns:
        The active LexConfig for this thread/context.

    """
    return _lex_config.get()


def set_lex_config(config: LexConfig) -> None:
    """Set lexing configuration for current context.

    Args:
        config: LexConfig instance to use for this context.

    """
    _lex_config.set(config)


def reset_lex_config() -> None:
    """Reset to the default configuration."""
    _lex_config.set(_DEFAULT_CONFIG)


@contextmanager
def lex_config_context(config: LexConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Args:
        config: LexConfig to use within the context.

    Yields:
        None

    Example:
        >>> with lex_config_context(LexConfig(flush_on_error=False)):
        ...     stream = TokenStream(source)
        >>> # Automatically reset to previous config

    """
    previous = _lex_config.get()
    _lex_config.set(config)
    try:
        yield
    finally:
        _lex_config.set(previous)


__all__ = [
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
]
