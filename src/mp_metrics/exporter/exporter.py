"""Exporter – MetricsExporter: composition root for one process."""
from __future__ import annotations

import asyncio
from typing import Any

from mp_metrics.application.scheduler import IntervalScheduler, Job, Scheduler
from mp_metrics.config.settings import ExporterSettings
from mp_metrics.exporter.file_dump import FileDumper
from mp_metrics.kernel.errors import DumpWriteError
from mp_metrics.observability.logging import get_logger
from mp_metrics.observability.metrics import MetricRegistry
from mp_metrics.observability.runtime import RuntimeMetrics

__all__ = ["MetricsExporter"]

RUNTIME_JOB_ID = "runtime-sample"
DUMP_JOB_ID = "metrics-dump"


class MetricsExporter:
    """Wire a registry, the runtime sampler and the file dump together.

    Every metric created through :attr:`registry` carries the
    ``project`` label from the settings.

    Usage::

        settings = SettingsFactory.create(ExporterSettings, [EnvSettingsLoader()])
        exporter = MetricsExporter.from_settings(settings)
        hits = exporter.registry.create_metric("cache_hits", "Cache hits", "counter")
        await exporter.start()
        ...
        await exporter.stop()
    """

    def __init__(
        self,
        settings: ExporterSettings,
        registry: MetricRegistry,
        runtime: RuntimeMetrics,
        dumper: FileDumper,
        scheduler: Scheduler,
        logger: Any,
    ) -> None:
        self._settings = settings
        self._registry = registry
        self._runtime = runtime
        self._dumper = dumper
        self._scheduler = scheduler
        self._log = logger
        self._started = False

        scheduler.add_job(
            Job(
                id=RUNTIME_JOB_ID,
                name="Sample runtime statistics",
                handler=self._sample,
                interval_seconds=settings.runtime_interval,
            )
        )
        if settings.dump_path:
            scheduler.add_job(
                Job(
                    id=DUMP_JOB_ID,
                    name="Dump metrics file",
                    handler=self._dump,
                    interval_seconds=settings.dump_interval,
                )
            )
        else:
            self._log.info("dump_path_empty")

    @classmethod
    def from_settings(cls, settings: ExporterSettings, logger: Any = None) -> MetricsExporter:
        log = (logger or get_logger(__name__)).bind(project=settings.project_name)
        registry = MetricRegistry(label_defaults={"project": settings.project_name})
        runtime = RuntimeMetrics(registry, trace_memory=settings.trace_memory)
        dumper = FileDumper(registry, settings.dump_path, log)
        scheduler = IntervalScheduler(log)
        return cls(settings, registry, runtime, dumper, scheduler, log)

    @property
    def registry(self) -> MetricRegistry:
        return self._registry

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    async def _sample(self) -> None:
        await asyncio.to_thread(self._runtime.collect)

    async def _dump(self) -> None:
        await asyncio.to_thread(self._dumper.dump)

    async def start(self) -> None:
        if self._started:
            return
        self._runtime.start()
        await self._sample()
        await self._scheduler.start()
        self._started = True
        self._log.info(
            "exporter_started",
            dump_path=self._settings.dump_path or None,
            dump_interval=self._settings.dump_interval,
            runtime_interval=self._settings.runtime_interval,
        )

    async def stop(self) -> None:
        """Stop the loops and write one last dump when a path is configured."""
        if not self._started:
            return
        await self._scheduler.stop()
        if self._settings.dump_path:
            await self._sample()
            try:
                await self._dump()
            except DumpWriteError as exc:
                self._log.error("final_dump_failed", **exc.log_fields())
        self._runtime.stop()
        self._started = False
        self._log.info("exporter_stopped")

    async def run_forever(self, stop_event: asyncio.Event) -> None:
        """Run until *stop_event* is set, then stop cleanly."""
        await self.start()
        try:
            await stop_event.wait()
        finally:
            await self.stop()
