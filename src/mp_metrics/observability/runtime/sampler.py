"""Observability – RuntimeMetrics: Python runtime statistics as metrics."""
from __future__ import annotations

import gc
import threading
import time
import tracemalloc
from typing import Any

from mp_metrics.observability.metrics import Metric, MetricKind, MetricRegistry

__all__ = ["RuntimeMetrics"]

_GENERATIONS = ("0", "1", "2")


class RuntimeMetrics:
    """Samples interpreter statistics into metrics created once at startup.

    The metrics are registered in the given registry when the sampler is
    built; :meth:`collect` refreshes their values.  GC pause time is measured
    through :data:`gc.callbacks` between :meth:`start` and :meth:`stop`.

    Traced-memory gauges only move when ``trace_memory`` is set (or when
    :mod:`tracemalloc` is already tracing), since tracing has a cost.
    """

    def __init__(self, registry: MetricRegistry, trace_memory: bool = False) -> None:
        self._trace_memory = trace_memory
        self._started_tracing = False
        self._installed = False
        self._gc_started_ns: int | None = None
        self._gc_pause_total_ns = 0
        self._cpu_start = time.process_time()

        gauge, counter = MetricKind.GAUGE, MetricKind.COUNTER
        self.threads = registry.create_metric(
            "python_runtime_threads_count", "Count of live threads", gauge
        )
        self.mem_traced_current = registry.create_metric(
            "python_mem_traced_current_bytes", "Bytes currently allocated as seen by tracemalloc", gauge
        )
        self.mem_traced_peak = registry.create_metric(
            "python_mem_traced_peak_bytes", "Peak bytes allocated as seen by tracemalloc", gauge
        )
        self.gc_objects = registry.create_metric(
            "python_gc_objects_tracked", "Count of objects tracked by the garbage collector", gauge
        )
        self.gc_collections: dict[str, Metric] = {}
        self.gc_collected: dict[str, Metric] = {}
        self.gc_uncollectable: dict[str, Metric] = {}
        for generation in _GENERATIONS:
            self.gc_collections[generation] = registry.create_metric(
                "python_gc_collections_total",
                "Count of collections per GC generation",
                counter,
                {"generation": generation},
            )
        for generation in _GENERATIONS:
            self.gc_collected[generation] = registry.create_metric(
                "python_gc_collected_total",
                "Count of objects collected per GC generation",
                counter,
                {"generation": generation},
            )
        for generation in _GENERATIONS:
            self.gc_uncollectable[generation] = registry.create_metric(
                "python_gc_uncollectable_total",
                "Count of uncollectable objects found per GC generation",
                counter,
                {"generation": generation},
            )
        self.gc_num = registry.create_metric(
            "python_gc_num", "The number of completed GC cycles", counter
        )
        self.gc_pause_total = registry.create_metric(
            "python_gc_pause_total", "Total GC pause in ns", counter
        )
        self.gc_fraction = registry.create_metric(
            "python_gc_fraction",
            "The fraction of this process's CPU time used by the GC since the sampler started",
            gauge,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._trace_memory and not tracemalloc.is_tracing():
            tracemalloc.start()
            self._started_tracing = True
        if not self._installed:
            gc.callbacks.append(self._on_gc)
            self._installed = True
        self._cpu_start = time.process_time()

    def stop(self) -> None:
        if self._installed:
            gc.callbacks.remove(self._on_gc)
            self._installed = False
        if self._started_tracing:
            tracemalloc.stop()
            self._started_tracing = False

    @property
    def gc_pause_total_ns(self) -> int:
        return self._gc_pause_total_ns

    # GC callbacks run inside the collector; no locks here.
    def _on_gc(self, phase: str, info: dict[str, Any]) -> None:  # noqa: ARG002
        if phase == "start":
            self._gc_started_ns = time.perf_counter_ns()
        elif phase == "stop" and self._gc_started_ns is not None:
            self._gc_pause_total_ns += time.perf_counter_ns() - self._gc_started_ns
            self._gc_started_ns = None

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------

    def collect(self) -> None:
        """Copy the current runtime statistics into the metrics."""
        self.threads.set_int(threading.active_count())

        if tracemalloc.is_tracing():
            current, peak = tracemalloc.get_traced_memory()
            self.mem_traced_current.set_int(current)
            self.mem_traced_peak.set_int(peak)

        self.gc_objects.set_int(len(gc.get_objects()))

        total_collections = 0
        for generation, stats in zip(_GENERATIONS, gc.get_stats()):
            self.gc_collections[generation].set_int(stats["collections"])
            self.gc_collected[generation].set_int(stats["collected"])
            self.gc_uncollectable[generation].set_int(stats["uncollectable"])
            total_collections += stats["collections"]
        self.gc_num.set_int(total_collections)

        pause_ns = self._gc_pause_total_ns
        self.gc_pause_total.set_int(pause_ns)
        cpu_elapsed = time.process_time() - self._cpu_start
        if cpu_elapsed > 0:
            self.gc_fraction.set_float(pause_ns / 1e9 / cpu_elapsed)
