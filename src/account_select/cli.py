"""Project CLI entrypoint.

Provides CLI commands for account-select:
- account-select check: Validate selector configuration and print a summary
- account-select match: Probe an address/owner pair against the selector
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

from account_select.config import (
    SelectorConfig,
    build_selector,
    load_plugin_config,
)
from account_select.env_parse import ConfigError
from account_select.keys import decode_key

if TYPE_CHECKING:
    from account_select.selector import AccountsSelector


def _pkg_version() -> str:
    try:
        return version("account-select")
    except PackageNotFoundError:
        return "0.0.0"


def _load_selector(args: argparse.Namespace) -> AccountsSelector:
    """Build the selector from --config or --env."""
    if args.env:
        config = SelectorConfig.from_env(args.env_prefix)
    else:
        config = SelectorConfig.from_plugin_config(load_plugin_config(args.config))
    return build_selector(config)


def _cmd_check(args: argparse.Namespace) -> None:
    """Validate configuration and print the built selector."""
    selector = _load_selector(args)
    print(json.dumps(selector.to_dict(), indent=2))
    state = "enabled" if selector.is_enabled() else "disabled"
    print(f"Selector OK ({state})")


def _cmd_match(args: argparse.Namespace) -> None:
    """Print whether an address/owner pair would be forwarded."""
    selector = _load_selector(args)
    account = decode_key(args.address, field="--address")
    owner = decode_key(args.owner, field="--owner") if args.owner else b""
    print("selected" if selector.is_account_selected(account, owner) else "dropped")


def _add_source_args(p: argparse.ArgumentParser) -> None:
    source = p.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", help="Path to JSON plugin config")
    source.add_argument("--env", action="store_true", help="Read ACCOUNT_SELECT_* env vars")
    p.add_argument("--env-prefix", default="ACCOUNT_SELECT_", help="Env var prefix for --env")
    p.add_argument("-v", "--verbose", action="store_true", help="Verbose output")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="account-select", description="account-select CLI")
    parser.add_argument(
        "--version", action="version", version=f"account-select {_pkg_version()}"
    )

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_check = sub.add_parser("check", help="Validate selector configuration")
    _add_source_args(p_check)

    p_match = sub.add_parser("match", help="Check whether an account would be selected")
    _add_source_args(p_match)
    p_match.add_argument("--address", required=True, help="Base58 account address")
    p_match.add_argument("--owner", help="Base58 owner key (optional)")

    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()

    level = logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        if args.cmd == "check":
            _cmd_check(args)
            return
        if args.cmd == "match":
            _cmd_match(args)
            return
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    raise SystemExit(2)
