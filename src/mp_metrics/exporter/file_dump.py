"""Exporter – FileDumper: write the registry's exposition text to a file."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from mp_metrics.kernel.errors import DumpWriteError
from mp_metrics.observability.metrics import MetricRegistry

__all__ = ["FileDumper"]


class FileDumper:
    """Render a registry and replace *path* with the result.

    The text goes to a sibling ``.tmp`` file first and is moved into place
    with :func:`os.replace`, so a collector never reads a half-written file.
    An empty *path* turns :meth:`dump` into a no-op.
    """

    def __init__(self, registry: MetricRegistry, path: str | Path, logger: Any) -> None:
        self._registry = registry
        self._path = Path(path) if str(path) else None
        self._log = logger.bind(component="file_dumper")
        self._warned_empty = False

    @property
    def path(self) -> Path | None:
        return self._path

    def dump(self) -> bool:
        """Write the current rendering; return ``False`` when no path is set.

        Raises
        ------
        DumpWriteError
            When the file cannot be written.
        """
        if self._path is None:
            if not self._warned_empty:
                self._log.info("dump_path_empty")
                self._warned_empty = True
            return False

        text = self._registry.render()
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            tmp_path.write_text(text, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as exc:
            raise DumpWriteError(str(self._path), cause=exc) from exc

        self._log.debug("metrics_dumped", path=str(self._path), bytes=len(text.encode("utf-8")))
        return True
