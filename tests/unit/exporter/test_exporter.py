"""Unit tests for MetricsExporter composition."""
from __future__ import annotations

import asyncio
import gc
import threading

import pytest

from mp_metrics.application.scheduler import InMemoryScheduler
from mp_metrics.config.settings import ExporterSettings
from mp_metrics.exporter import FileDumper, MetricsExporter
from mp_metrics.exporter.exporter import DUMP_JOB_ID, RUNTIME_JOB_ID
from mp_metrics.observability.metrics import MetricRegistry
from mp_metrics.observability.runtime import RuntimeMetrics
from mp_metrics.testing.fakes import RecordingLogger


@pytest.fixture(autouse=True)
def _restore_gc_callbacks():
    before = list(gc.callbacks)
    yield
    gc.callbacks[:] = before


def _build(settings: ExporterSettings, log: RecordingLogger) -> tuple[MetricsExporter, InMemoryScheduler]:
    registry = MetricRegistry(label_defaults={"project": settings.project_name})
    runtime = RuntimeMetrics(registry)
    dumper = FileDumper(registry, settings.dump_path, log)
    scheduler = InMemoryScheduler()
    return MetricsExporter(settings, registry, runtime, dumper, scheduler, log), scheduler


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------


class TestExporterWiring:
    def test_jobs_scheduled_with_dump_path(self, tmp_path) -> None:
        settings = ExporterSettings(
            project_name="p", dump_path=str(tmp_path / "m.prom"), dump_interval=5, runtime_interval=2
        )
        _, scheduler = _build(settings, RecordingLogger())
        jobs = {j.id: j.interval_seconds for j in scheduler.list_jobs()}
        assert jobs == {RUNTIME_JOB_ID: 2, DUMP_JOB_ID: 5}

    def test_no_dump_job_without_path(self) -> None:
        log = RecordingLogger()
        _, scheduler = _build(ExporterSettings(project_name="p"), log)
        assert [j.id for j in scheduler.list_jobs()] == [RUNTIME_JOB_ID]
        assert "dump_path_empty" in log.events("info")

    def test_from_settings_applies_project_label(self) -> None:
        exporter = MetricsExporter.from_settings(ExporterSettings(project_name="billing"), RecordingLogger())
        m = exporter.registry.create_metric("cache_hits", "Cache hits", "counter")
        assert m.labels == {"project": "billing"}
        assert 'python_runtime_threads_count{project="billing"}' in exporter.registry.render()


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


class TestExporterLifecycle:
    def test_dump_job_writes_file(self, tmp_path) -> None:
        async def _run():
            path = tmp_path / "m.prom"
            exporter, scheduler = _build(
                ExporterSettings(project_name="p", dump_path=str(path)), RecordingLogger()
            )
            exporter.registry.create_metric("jobs_done", "Jobs done", "counter").increment_by(4)
            await exporter.start()
            event = await scheduler.run_now(DUMP_JOB_ID)
            assert event.success
            text = path.read_text(encoding="utf-8")
            assert 'jobs_done{project="p"} 4\n' in text
            assert "# TYPE python_gc_num counter\n" in text
            await exporter.stop()
        asyncio.run(_run())

    def test_runtime_job_refreshes_metrics(self) -> None:
        async def _run():
            exporter, scheduler = _build(ExporterSettings(project_name="p"), RecordingLogger())
            threads = next(
                m for m in exporter.registry.metrics() if m.name == "python_runtime_threads_count"
            )
            threads.set_int(0)
            await scheduler.run_now(RUNTIME_JOB_ID)
            assert threads.int_value >= 1
        asyncio.run(_run())

    def test_runtime_collect_runs_off_event_loop_thread(self, monkeypatch: pytest.MonkeyPatch) -> None:
        async def _run():
            exporter, scheduler = _build(ExporterSettings(project_name="p"), RecordingLogger())
            seen: list[int] = []
            monkeypatch.setattr(
                exporter._runtime, "collect", lambda: seen.append(threading.get_ident())
            )
            await scheduler.run_now(RUNTIME_JOB_ID)
            assert seen and seen[0] != threading.get_ident()
        asyncio.run(_run())

    def test_start_and_stop(self) -> None:
        async def _run():
            log = RecordingLogger()
            exporter, scheduler = _build(ExporterSettings(project_name="p"), log)
            await exporter.start()
            await exporter.start()
            assert scheduler.is_running
            await exporter.stop()
            await exporter.stop()
            assert not scheduler.is_running
            assert log.events("info").count("exporter_started") == 1
            assert log.events("info").count("exporter_stopped") == 1
        asyncio.run(_run())

    def test_stop_flushes_final_dump(self, tmp_path) -> None:
        async def _run():
            path = tmp_path / "m.prom"
            exporter, _ = _build(ExporterSettings(project_name="p", dump_path=str(path)), RecordingLogger())
            await exporter.start()
            assert not path.exists()
            await exporter.stop()
            assert path.exists()
        asyncio.run(_run())

    def test_final_dump_failure_logged(self, tmp_path) -> None:
        async def _run():
            path = tmp_path / "no-such-dir" / "m.prom"
            log = RecordingLogger()
            exporter, _ = _build(ExporterSettings(project_name="p", dump_path=str(path)), log)
            await exporter.start()
            await exporter.stop()
            assert log.events("error") == ["final_dump_failed"]
            _, _, fields = next(r for r in log.records if r[1] == "final_dump_failed")
            assert fields["error_code"] == "dump_write_error"
            assert fields["path"] == str(path)
            assert "exporter_stopped" in log.events("info")
        asyncio.run(_run())

    def test_run_forever_with_interval_scheduler(self, tmp_path) -> None:
        async def _run():
            path = tmp_path / "m.prom"
            settings = ExporterSettings(
                project_name="p", dump_path=str(path), dump_interval=0.02, runtime_interval=0.02
            )
            exporter = MetricsExporter.from_settings(settings, RecordingLogger())
            counter = exporter.registry.create_metric("ticks", "Ticks", "counter")
            stop_event = asyncio.Event()
            runner = asyncio.create_task(exporter.run_forever(stop_event))
            await asyncio.sleep(0.1)
            assert path.exists()
            counter.increment()
            stop_event.set()
            await asyncio.wait_for(runner, timeout=2.0)
            assert 'ticks{project="p"} 1\n' in path.read_text(encoding="utf-8")
        asyncio.run(_run())
