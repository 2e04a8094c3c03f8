"""Per-record selection gate for streaming hosts.

Wraps an AccountsSelector with the host-side short-circuit: ``is_enabled()``
is read once at construction, and a disabled selector skips evaluation
entirely.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from account_select.metrics import SelectionMetrics, get_selection_metrics

if TYPE_CHECKING:
    from account_select.selector import AccountsSelector, ByteLike


class SelectionGate:
    """Forward/drop decision point called once per account update."""

    def __init__(
        self,
        selector: AccountsSelector,
        metrics: SelectionMetrics | None = None,
    ) -> None:
        self._selector = selector
        self._enabled = selector.is_enabled()
        self._metrics = metrics if metrics is not None else get_selection_metrics()

    @property
    def selector(self) -> AccountsSelector:
        return self._selector

    @property
    def enabled(self) -> bool:
        return self._enabled

    def should_forward(self, account: ByteLike, owner: ByteLike) -> bool:
        """Decide whether an account update is forwarded downstream."""
        if not self._enabled:
            self._metrics.record_skipped()
            return False
        if self._selector.is_account_selected(account, owner):
            self._metrics.record_selected()
            return True
        self._metrics.record_dropped()
        return False
