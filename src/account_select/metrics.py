"""Selection metrics for observability.

Metrics exported:
- account_select_selected_total: Counter of records forwarded
- account_select_dropped_total: Counter of records dropped by the selector
- account_select_skipped_total: Counter of records skipped because
  selection is disabled

These metric names are stable contracts.
DO NOT rename without updating tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Metric name constants (stable contracts)
METRIC_SELECTED = "account_select_selected_total"
METRIC_DROPPED = "account_select_dropped_total"
METRIC_SKIPPED = "account_select_skipped_total"

_HELP = {
    METRIC_SELECTED: "Total account updates selected for forwarding",
    METRIC_DROPPED: "Total account updates dropped by the selector",
    METRIC_SKIPPED: "Total account updates skipped with selection disabled",
}


@dataclass
class SelectionMetrics:
    """Selection decision counters.

    Plain int fields so recording stays allocation-free on the hot path.
    Not thread-safe; keep one instance per worker or accept racy counts.
    """

    selected_total: int = 0
    dropped_total: int = 0
    skipped_total: int = 0

    def record_selected(self) -> None:
        self.selected_total += 1

    def record_dropped(self) -> None:
        self.dropped_total += 1

    def record_skipped(self) -> None:
        self.skipped_total += 1

    def get_metrics(self) -> dict[str, Any]:
        """Get all metrics as dict keyed by metric name."""
        return {
            METRIC_SELECTED: self.selected_total,
            METRIC_DROPPED: self.dropped_total,
            METRIC_SKIPPED: self.skipped_total,
        }

    def to_prometheus_lines(self) -> list[str]:
        """Export metrics in Prometheus text format.

        Returns list of lines suitable for /metrics endpoint.
        """
        lines: list[str] = []
        for name, value in self.get_metrics().items():
            lines.append(f"# HELP {name} {_HELP[name]}")
            lines.append(f"# TYPE {name} counter")
            lines.append(f"{name} {value}")
        return lines

    def reset(self) -> None:
        """Reset all metrics."""
        self.selected_total = 0
        self.dropped_total = 0
        self.skipped_total = 0


# Global metrics instance
_metrics = SelectionMetrics()


def get_selection_metrics() -> SelectionMetrics:
    """Get global selection metrics instance."""
    return _metrics


def reset_selection_metrics() -> None:
    """Reset global selection metrics."""
    _metrics.reset()
