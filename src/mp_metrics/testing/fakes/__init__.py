"""Testing fakes – in-memory doubles for kernel ports."""
from mp_metrics.testing.fakes.logger import RecordingLogger

__all__ = ["RecordingLogger"]
