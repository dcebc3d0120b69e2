"""Entrypoint for running the exporter via ``python -m mp_metrics``.

Settings come from ``METRICS_*`` environment variables, optionally seeded
from a ``.env`` file in the working directory and from the JSON file named
by the first command-line argument.
"""
from __future__ import annotations

import asyncio
import signal
import sys

from mp_metrics.config.settings import ExporterSettings, SettingsFactory, SettingsValidator
from mp_metrics.exporter import MetricsExporter
from mp_metrics.observability.logging import JsonLoggerFactory, get_logger


async def _serve(settings: ExporterSettings) -> None:
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except NotImplementedError:  # pragma: no cover - Windows
            signal.signal(sig, lambda *_: loop.call_soon_threadsafe(stop_event.set))
    exporter = MetricsExporter.from_settings(settings, get_logger("mp_metrics", component="exporter"))
    await exporter.run_forever(stop_event)


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    settings = SettingsFactory.from_sources(
        ExporterSettings, config_file=args[0] if args else None
    )
    JsonLoggerFactory.configure(level=settings.level, fmt=settings.log_format)
    log = get_logger("mp_metrics")
    for problem in SettingsValidator().validate(settings):
        log.warning("settings_problem", problem=problem)
    asyncio.run(_serve(settings))


if __name__ == "__main__":  # pragma: no cover
    main()
