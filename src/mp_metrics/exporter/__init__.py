"""Exporter – periodic file dump and process composition."""
from mp_metrics.exporter.exporter import MetricsExporter
from mp_metrics.exporter.file_dump import FileDumper

__all__ = ["FileDumper", "MetricsExporter"]
