"""account-select - account selection predicate for streaming pipelines.

Decides per account update whether a record is forwarded downstream,
from statically configured accounts, owners and hash slot ranges.

Note: version is sourced from package metadata (pyproject.toml).
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from account_select.config import SelectorConfig, build_selector, load_plugin_config
from account_select.env_parse import ConfigError
from account_select.gate import SelectionGate
from account_select.keys import WILDCARD
from account_select.selector import AccountsSelector, SlotRange


def _pkg_version() -> str:
    try:
        return version("account-select")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _pkg_version()

__all__ = [
    "WILDCARD",
    "AccountsSelector",
    "ConfigError",
    "SelectionGate",
    "SelectorConfig",
    "SlotRange",
    "__version__",
    "build_selector",
    "load_plugin_config",
]
