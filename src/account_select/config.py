"""Selector configuration loading.

Raw configuration comes from the host's JSON plugin config (the
``accounts_selector`` section) or from ``ACCOUNT_SELECT_*`` environment
variables. A missing section / no variables at all means "no explicit
configuration", which builds the select-everything default selector.

Example plugin config:
    {
        "accounts_selector": {
            "accounts": ["9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"],
            "owners": [],
            "hash_slots": [0, 4096]
        }
    }
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from account_select.env_parse import ConfigError, is_set, parse_csv, parse_int_list
from account_select.selector import AccountsSelector

logger = logging.getLogger(__name__)

SECTION = "accounts_selector"
ENV_PREFIX = "ACCOUNT_SELECT_"


def _str_list(d: dict[str, Any], key: str) -> tuple[str, ...]:
    value = d.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"{SECTION}.{key}: expected a list of strings"
        raise ConfigError(msg)
    return tuple(value)


def _int_list(d: dict[str, Any], key: str) -> tuple[int, ...]:
    value = d.get(key, [])
    if not isinstance(value, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in value
    ):
        msg = f"{SECTION}.{key}: expected a list of integers"
        raise ConfigError(msg)
    return tuple(value)


@dataclass(frozen=True)
class SelectorConfig:
    """Raw (undecoded) selector configuration.

    Attributes:
        accounts: Base58 account keys, may contain the "*" wildcard
        owners: Base58 owner keys
        hash_slots: Empty, or [from, to) slot bounds
    """

    accounts: tuple[str, ...] = ()
    owners: tuple[str, ...] = ()
    hash_slots: tuple[int, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "accounts": list(self.accounts),
            "owners": list(self.owners),
            "hash_slots": list(self.hash_slots),
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> SelectorConfig:
        """Create from the ``accounts_selector`` section.

        Raises:
            ConfigError: If the section or any field has the wrong shape.
        """
        if not isinstance(d, dict):
            msg = f"{SECTION}: expected an object, got {type(d).__name__}"
            raise ConfigError(msg)
        return cls(
            accounts=_str_list(d, "accounts"),
            owners=_str_list(d, "owners"),
            hash_slots=_int_list(d, "hash_slots"),
        )

    @classmethod
    def from_plugin_config(cls, d: dict[str, Any]) -> SelectorConfig | None:
        """Extract the selector section from a full plugin config.

        Returns None when the section is absent.
        """
        if not isinstance(d, dict):
            msg = f"plugin config: expected an object, got {type(d).__name__}"
            raise ConfigError(msg)
        section = d.get(SECTION)
        if section is None:
            return None
        return cls.from_dict(section)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> SelectorConfig | None:
        """Read ``<prefix>ACCOUNTS``, ``<prefix>OWNERS``, ``<prefix>HASH_SLOTS``.

        Returns None when none of the variables is set.
        """
        names = (f"{prefix}ACCOUNTS", f"{prefix}OWNERS", f"{prefix}HASH_SLOTS")
        if not any(is_set(n) for n in names):
            return None
        return cls(
            accounts=tuple(parse_csv(names[0])),
            owners=tuple(parse_csv(names[1])),
            hash_slots=tuple(parse_int_list(names[2])),
        )

    def build(self) -> AccountsSelector:
        """Build the selector (decodes and validates keys)."""
        return AccountsSelector.new(self.accounts, self.owners, self.hash_slots)


def load_plugin_config(path: str | Path) -> dict[str, Any]:
    """Load a JSON plugin config file.

    Raises:
        ConfigError: If the file cannot be read or is not valid JSON.
    """
    config_path = Path(path)
    try:
        with config_path.open() as f:
            data = json.load(f)
    except OSError as exc:
        msg = f"cannot read config {config_path}: {exc}"
        raise ConfigError(msg) from exc
    except json.JSONDecodeError as exc:
        msg = f"invalid JSON in {config_path}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{config_path}: top-level JSON value must be an object"
        raise ConfigError(msg)
    return data


def build_selector(config: SelectorConfig | None) -> AccountsSelector:
    """Build a selector, falling back to select-all without explicit config."""
    if config is None:
        logger.info("No %s configured, selecting all accounts", SECTION)
        return AccountsSelector.default()
    return config.build()
