"""ContextVar-based parse configuration for inkline.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per ``Inkline`` instance, read by every scanner created
in that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    from inkline.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(preserve_unmatched_runs=False)):
        root = LineScanner("***unclosed").scan()

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator

from inkline.errors import ConfigError


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable scan configuration.

    Attributes:
        escape_char: Character that makes the following character literal
        preserve_unmatched_runs: Emit mismatched or unterminated emphasis runs
            as literal text. False reproduces the legacy behavior of dropping
            them from the output.
        escape_trailing_ampersand: Escape an ``&`` even when fewer than four
            characters follow it. False skips escaping in that case.
        text_transformer: Optional callback applied to plain text when rendering

    """

    escape_char: str = "\\"
    preserve_unmatched_runs: bool = True
    escape_trailing_ampersand: bool = True
    text_transformer: Callable[[str], str] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.escape_char, str) or len(self.escape_char) != 1:
            raise ConfigError("escape_char", f"expected a single character, got {self.escape_char!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored so configs loaded from TOML or YAML sections
        that carry other settings can be passed straight through.

        Example:
            >>> config = ParseConfig.from_dict({
            ...     "preserve_unmatched_runs": False,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.preserve_unmatched_runs
            False

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "inkline_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get current parse configuration (thread-local)."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set parse configuration for the current context.

    Only affects the current thread's context.
    """
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset to the default configuration singleton."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with parse_config_context(ParseConfig(escape_trailing_ampersand=False)):
        ...     root = parse_line("a &")
        >>> # previous config is active again

    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
]
