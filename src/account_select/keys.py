"""Base58 key decoding for selector configuration.

Accounts and owners are configured as base58 strings and decoded once,
at selector construction. Nothing on the per-record path touches this module.
"""

from __future__ import annotations

import logging

import base58

from account_select.env_parse import ConfigError

logger = logging.getLogger(__name__)

# Accounts entry that selects every record
WILDCARD = "*"

# Expected length of a decoded public key (logged, not enforced)
PUBKEY_LEN = 32


def decode_key(key: str, *, field: str = "key") -> bytes:
    """Decode a base58 key string into raw bytes.

    Args:
        key: Base58-encoded key.
        field: Config field the key came from (used in error messages).

    Raises:
        ConfigError: If the key is not a non-empty, valid base58 string.
    """
    if not isinstance(key, str):
        msg = f"{field}: expected base58 string, got {type(key).__name__}"
        raise ConfigError(msg)
    if not key.strip():
        msg = f"{field}: empty key"
        raise ConfigError(msg)
    # b58decode strips trailing whitespace itself
    if key != key.strip():
        msg = f"{field}: whitespace around base58 key {key!r}"
        raise ConfigError(msg)
    try:
        raw = base58.b58decode(key)
    except ValueError as exc:
        msg = f"{field}: invalid base58 key {key!r}"
        raise ConfigError(msg) from exc
    if len(raw) != PUBKEY_LEN:
        logger.warning(
            "%s: key %s decodes to %d bytes, expected %d", field, key, len(raw), PUBKEY_LEN
        )
    return raw


def decode_keys(keys: list[str] | tuple[str, ...], *, field: str) -> frozenset[bytes]:
    """Decode every key, failing on the first malformed one."""
    return frozenset(decode_key(k, field=field) for k in keys)


def encode_key(raw: bytes) -> str:
    """Encode raw key bytes as base58."""
    return base58.b58encode(raw).decode("ascii")
