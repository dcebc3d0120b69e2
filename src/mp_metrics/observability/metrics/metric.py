"""Observability – Metric, a single named and labelled measurement."""
from __future__ import annotations

import enum
import threading
from collections.abc import Mapping

_UINT64_MASK = (1 << 64) - 1


class MetricKind(str, enum.Enum):
    """Common exposition type tokens. Any string is accepted as a kind."""

    COUNTER = "counter"
    GAUGE = "gauge"
    UNTYPED = "untyped"


class Metric:
    """One measurement of a metric family, holding an int and a float value.

    Create metrics through :meth:`MetricRegistry.create_metric` so that the
    registry's label defaults are applied.  Name, help and kind are fixed;
    the values and the metric's own labels change only through the setters.

    A non-zero ``float_value`` takes precedence over ``int_value`` when the
    metric is rendered; a float of exactly ``0.0`` defers to the int.

    ``int_value`` is an unsigned 64-bit quantity: arithmetic wraps modulo
    ``2**64``, so a negative input never renders with a minus sign.
    """

    __slots__ = ("_float_value", "_help", "_int_value", "_kind", "_labels", "_lock", "_name")

    def __init__(
        self,
        name: str,
        help: str,  # noqa: A002
        kind: str | MetricKind,
        labels: Mapping[str, str] | None = None,
    ) -> None:
        self._name = name
        self._help = help
        self._kind = kind.value if isinstance(kind, MetricKind) else str(kind)
        self._labels: dict[str, str] = dict(labels or {})
        self._int_value = 0
        self._float_value = 0.0
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    @property
    def help(self) -> str:
        return self._help

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def labels(self) -> dict[str, str]:
        with self._lock:
            return dict(self._labels)

    @property
    def int_value(self) -> int:
        with self._lock:
            return self._int_value

    @property
    def float_value(self) -> float:
        with self._lock:
            return self._float_value

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def increment(self) -> None:
        with self._lock:
            self._int_value = (self._int_value + 1) & _UINT64_MASK

    def increment_by(self, n: int) -> None:
        with self._lock:
            self._int_value = (self._int_value + n) & _UINT64_MASK

    def set_int(self, value: int) -> None:
        with self._lock:
            self._int_value = value & _UINT64_MASK

    def set_float(self, value: float) -> None:
        with self._lock:
            self._float_value = float(value)

    def set_label(self, key: str, value: str) -> None:
        with self._lock:
            self._labels[key] = value

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> tuple[dict[str, str], int, float]:
        """Return ``(labels, int_value, float_value)`` read under one lock."""
        with self._lock:
            return dict(self._labels), self._int_value, self._float_value

    def value(self) -> tuple[int, float]:
        with self._lock:
            return self._int_value, self._float_value

    def __repr__(self) -> str:
        int_value, float_value = self.value()
        return (
            f"Metric(name={self._name!r}, kind={self._kind!r}, labels={self.labels!r}, "
            f"int_value={int_value!r}, float_value={float_value!r})"
        )


__all__ = ["Metric", "MetricKind"]
