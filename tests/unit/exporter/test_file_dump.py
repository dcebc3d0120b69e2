"""Unit tests for FileDumper."""
from __future__ import annotations

import pytest

from mp_metrics.exporter import FileDumper
from mp_metrics.kernel.errors import DumpWriteError, InfrastructureError
from mp_metrics.observability.metrics import MetricRegistry
from mp_metrics.testing.fakes import RecordingLogger


@pytest.fixture()
def registry() -> MetricRegistry:
    reg = MetricRegistry(label_defaults={"project": "test_project"})
    reg.create_metric("requests_total", "Total requests", "counter").set_int(3)
    return reg


class TestFileDumper:
    def test_writes_rendered_text(self, registry: MetricRegistry, tmp_path) -> None:
        path = tmp_path / "metrics.prom"
        assert FileDumper(registry, path, RecordingLogger()).dump() is True
        assert path.read_text(encoding="utf-8") == registry.render()

    def test_overwrites_previous_dump(self, registry: MetricRegistry, tmp_path) -> None:
        path = tmp_path / "metrics.prom"
        dumper = FileDumper(registry, path, RecordingLogger())
        dumper.dump()
        registry.metrics()[0].set_int(99)
        dumper.dump()
        assert 'requests_total{project="test_project"} 99\n' in path.read_text(encoding="utf-8")

    def test_no_temp_file_left(self, registry: MetricRegistry, tmp_path) -> None:
        FileDumper(registry, tmp_path / "metrics.prom", RecordingLogger()).dump()
        assert [p.name for p in tmp_path.iterdir()] == ["metrics.prom"]

    def test_empty_registry_writes_empty_file(self, tmp_path) -> None:
        path = tmp_path / "metrics.prom"
        FileDumper(MetricRegistry(), path, RecordingLogger()).dump()
        assert path.read_text(encoding="utf-8") == ""

    def test_logs_debug_on_success(self, registry: MetricRegistry, tmp_path) -> None:
        log = RecordingLogger()
        path = tmp_path / "metrics.prom"
        FileDumper(registry, path, log).dump()
        level, event, fields = log.records[-1]
        assert (level, event) == ("debug", "metrics_dumped")
        assert fields["path"] == str(path)
        assert fields["bytes"] == len(registry.render())
        assert fields["component"] == "file_dumper"

    def test_empty_path_skips(self, registry: MetricRegistry) -> None:
        log = RecordingLogger()
        dumper = FileDumper(registry, "", log)
        assert dumper.path is None
        assert dumper.dump() is False
        assert dumper.dump() is False
        assert log.events("info") == ["dump_path_empty"]

    def test_write_failure_raises_dump_write_error(self, registry: MetricRegistry, tmp_path) -> None:
        path = tmp_path / "missing-dir" / "metrics.prom"
        with pytest.raises(DumpWriteError) as exc_info:
            FileDumper(registry, path, RecordingLogger()).dump()
        err = exc_info.value
        assert isinstance(err, InfrastructureError)
        assert err.path == str(path)
        assert isinstance(err.cause, OSError)
        assert err.to_dict()["detail"] == {"path": str(path)}

    def test_failure_does_not_prevent_later_dump(self, registry: MetricRegistry, tmp_path) -> None:
        target_dir = tmp_path / "later"
        dumper = FileDumper(registry, target_dir / "metrics.prom", RecordingLogger())
        with pytest.raises(DumpWriteError):
            dumper.dump()
        target_dir.mkdir()
        assert dumper.dump() is True
