"""Tests for base58 key decoding."""

from __future__ import annotations

import logging

import pytest

from account_select.env_parse import ConfigError
from account_select.keys import PUBKEY_LEN, decode_key, decode_keys, encode_key

DEX_KEY_B58 = "9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"


class TestDecodeKey:
    def test_pubkey_length(self) -> None:
        assert len(decode_key(DEX_KEY_B58)) == PUBKEY_LEN

    def test_zero_key(self) -> None:
        assert decode_key("1" * 32) == bytes(32)

    def test_short_key_not_length_checked(self) -> None:
        """Decoded keys have no enforced length."""
        assert decode_key("2") == b"\x01"

    def test_encode_roundtrip(self) -> None:
        assert encode_key(decode_key(DEX_KEY_B58)) == DEX_KEY_B58

    @pytest.mark.parametrize("bad", ["0", "O", "I", "l", "abc+def"])
    def test_invalid_characters(self, bad: str) -> None:
        with pytest.raises(ConfigError, match="invalid base58 key"):
            decode_key(bad)

    def test_field_in_message(self) -> None:
        with pytest.raises(ConfigError, match="^owners: "):
            decode_key("0", field="owners")

    @pytest.mark.parametrize("blank", ["", "   ", "\n\t"])
    def test_empty(self, blank: str) -> None:
        with pytest.raises(ConfigError, match="empty key"):
            decode_key(blank)

    @pytest.mark.parametrize(
        "padded", [DEX_KEY_B58 + " ", DEX_KEY_B58 + " \n", " " + DEX_KEY_B58, "\t" + "1" * 32]
    )
    def test_surrounding_whitespace_rejected(self, padded: str) -> None:
        with pytest.raises(ConfigError, match="whitespace around base58 key"):
            decode_key(padded, field="accounts")

    def test_short_key_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="account_select.keys"):
            decode_key("2", field="owners")
        assert "decodes to 1 bytes, expected 32" in caplog.text

    def test_pubkey_length_does_not_warn(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="account_select.keys"):
            decode_key(DEX_KEY_B58)
        assert caplog.records == []

    def test_non_string(self) -> None:
        with pytest.raises(ConfigError, match="expected base58 string, got int"):
            decode_key(123)  # type: ignore[arg-type]


class TestDecodeKeys:
    def test_dedup(self) -> None:
        keys = decode_keys([DEX_KEY_B58, DEX_KEY_B58, "1" * 32], field="accounts")
        assert keys == frozenset({decode_key(DEX_KEY_B58), bytes(32)})

    def test_empty_list(self) -> None:
        assert decode_keys([], field="accounts") == frozenset()

    def test_fails_on_first_bad_key(self) -> None:
        with pytest.raises(ConfigError, match="accounts: invalid base58 key '0OIl'"):
            decode_keys([DEX_KEY_B58, "0OIl"], field="accounts")
