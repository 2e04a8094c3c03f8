"""Environment variable parsing for selector configuration.

Single source of truth for reading list-valued settings from the
environment and for the ``ConfigError`` raised on any bad configuration.

Design decisions:
- Unset / blank variables parse as an empty list, never as "select all".
- strict=True (default): malformed values raise ``ConfigError``.
- strict=False: malformed values log a warning and yield the default.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when selector configuration is invalid.

    Construction-time only; the host should refuse to start.
    """


def is_set(name: str) -> bool:
    """Return True if the variable is present (even if blank)."""
    return name in os.environ


def parse_csv(name: str) -> list[str]:
    """Parse a comma-separated environment variable.

    Trims whitespace from each element and drops empty strings.

    Returns an empty list when the variable is unset or blank.
    """
    raw = os.environ.get(name)
    if raw is None:
        return []
    return [item for item in (s.strip() for s in raw.split(",")) if item]


def parse_int_list(
    name: str,
    default: list[int] | None = None,
    *,
    strict: bool = True,
) -> list[int]:
    """Parse a comma-separated list of integers.

    Args:
        name: Environment variable name.
        default: Value when unset or (in non-strict mode) unparseable.
        strict: If *True*, non-integer elements raise :class:`ConfigError`.
                If *False*, they log a warning and *default* is returned.
    """
    fallback = [] if default is None else list(default)
    items = parse_csv(name)
    if not items:
        return fallback
    try:
        return [int(item) for item in items]
    except ValueError:
        if strict:
            raise ConfigError(
                f"invalid integer list for {name}: {os.environ[name]!r}"
            ) from None
        logger.warning(
            "Invalid integer list for %s: %r, using default %s",
            name,
            os.environ[name],
            fallback,
        )
        return fallback
