"""Account selection predicate.

Decides, per account update, whether the record is forwarded downstream.
Built once from static configuration; evaluation afterwards is set lookups
and a bounds check, with no decoding.

Selection rules (logical OR):
    1. Address slot falls inside the configured hash slot range
    2. Wildcard "*" in accounts (select everything)
    3. Address is one of the configured accounts
    4. Owner is one of the configured owners

Usage:
    selector = AccountsSelector.new(
        accounts=["9xQeWvG816bUx9EPjHmaT23yvVM2ZWbrrpZb9PusVFin"],
        owners=[],
        hash_slots=[42, 300],
    )
    if selector.is_enabled() and selector.is_account_selected(pubkey, owner):
        forward(update)

Known looseness:
- A slot range with start >= end is accepted and matches nothing.
- AccountsSelector() / default() selects everything, while
  AccountsSelector.new([], [], []) selects nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from account_select.env_parse import ConfigError
from account_select.keys import WILDCARD, decode_keys, encode_key

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)

U16_MAX = 0xFFFF
SLOT_BOUNDS_LEN = 2
SLOT_BYTES = 2  # little-endian u16 prefix of the address

ByteLike = bytes | bytearray | memoryview


@dataclass(frozen=True)
class SlotRange:
    """Half-open [start, end) range over the address slot.

    The slot is the first two address bytes read as a little-endian u16.

    Attributes:
        start: Inclusive lower bound
        end: Exclusive upper bound
    """

    start: int
    end: int

    @classmethod
    def from_config(cls, bounds: Sequence[int]) -> SlotRange:
        """Build from a ``[from, to)`` config list.

        Raises:
            ConfigError: If there are not exactly two bounds, or a bound is
                not an integer in u16 range.
        """
        if len(bounds) != SLOT_BOUNDS_LEN:
            msg = f"hash_slots: expected {SLOT_BOUNDS_LEN} bounds, got {len(bounds)}"
            raise ConfigError(msg)
        for value in bounds:
            if isinstance(value, bool) or not isinstance(value, int):
                msg = f"hash_slots: bound {value!r} is not an integer"
                raise ConfigError(msg)
            if not 0 <= value <= U16_MAX:
                msg = f"hash_slots: bound {value} is outside 0..{U16_MAX}"
                raise ConfigError(msg)
        return cls(start=bounds[0], end=bounds[1])

    def contains(self, address: ByteLike) -> bool:
        """Check if the address slot falls inside the range.

        Addresses shorter than two bytes have no slot and never match.
        """
        if len(address) < SLOT_BYTES:
            return False
        slot = address[0] | (address[1] << 8)
        return self.start <= slot < self.end

    def to_list(self) -> list[int]:
        return [self.start, self.end]


@dataclass(frozen=True)
class AccountsSelector:
    """Immutable account selection predicate.

    Safe to share between threads: nothing is mutated after construction.

    Attributes:
        accounts: Decoded account keys selected by exact match
        owners: Decoded owner keys selected by exact match
        select_all: Wildcard mode, every record is selected
        slot_range: Optional hash slot range
    """

    accounts: frozenset[bytes] = field(default_factory=frozenset)
    owners: frozenset[bytes] = field(default_factory=frozenset)
    select_all: bool = True
    slot_range: SlotRange | None = None

    @classmethod
    def default(cls) -> AccountsSelector:
        """Selector used when no selection is configured: selects everything."""
        return cls()

    @classmethod
    def new(
        cls,
        accounts: Sequence[str],
        owners: Sequence[str],
        hash_slots: Sequence[int],
    ) -> AccountsSelector:
        """Build a selector from raw configuration.

        A wildcard anywhere in ``accounts`` wins over everything else; the
        remaining arguments are then ignored without validation.

        Raises:
            ConfigError: On an undecodable key or malformed hash slots.
        """
        logger.info(
            "Creating AccountsSelector from accounts: %s, owners: %s, hash slots: %s",
            list(accounts),
            list(owners),
            list(hash_slots),
        )

        if WILDCARD in accounts:
            return cls(select_all=True)

        account_keys = decode_keys(accounts, field="accounts")
        owner_keys = decode_keys(owners, field="owners")
        slot_range = SlotRange.from_config(hash_slots) if len(hash_slots) > 0 else None
        return cls(
            accounts=account_keys,
            owners=owner_keys,
            select_all=False,
            slot_range=slot_range,
        )

    def is_account_selected(self, account: ByteLike, owner: ByteLike) -> bool:
        """Check if an account update should be forwarded.

        Buffers (bytearray, memoryview) are copied to bytes for the set
        lookups; plain bytes are used as-is.
        """
        if type(account) is not bytes:
            account = bytes(account)
        if type(owner) is not bytes:
            owner = bytes(owner)
        return (
            (self.slot_range is not None and self.slot_range.contains(account))
            or self.select_all
            or account in self.accounts
            or owner in self.owners
        )

    def is_enabled(self) -> bool:
        """Check if any account is of interest at all.

        Hosts use this to skip selection (and everything downstream of it)
        when nothing would ever be selected.
        """
        return (
            self.slot_range is not None
            or self.select_all
            or bool(self.accounts)
            or bool(self.owners)
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict (keys re-encoded as base58)."""
        return {
            "select_all": self.select_all,
            "accounts": sorted(encode_key(k) for k in self.accounts),
            "owners": sorted(encode_key(k) for k in self.owners),
            "hash_slots": self.slot_range.to_list() if self.slot_range is not None else [],
            "enabled": self.is_enabled(),
        }
