"""Application scheduler – Scheduler Protocol and JobExecutionContext."""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Protocol, runtime_checkable

from mp_metrics.application.scheduler.job import Job
from mp_metrics.kernel.errors import BaseError

__all__ = ["JobExecutedEvent", "JobExecutionContext", "Scheduler"]


@dataclass(frozen=True)
class JobExecutedEvent:
    """Outcome of one job run."""

    job_id: str
    started_at: datetime
    duration_ms: float
    error: str | None = None
    error_code: str | None = None
    error_fields: dict[str, Any] = field(default_factory=dict)

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass
class JobExecutionContext:
    """Run a job handler once and turn any exception into a failed event.

    Errors from the :mod:`mp_metrics.kernel.errors` hierarchy keep their
    ``code`` and detail in ``error_fields``; anything else is reported under
    its class name.
    """

    job: Job
    events: list[JobExecutedEvent] = field(default_factory=list)

    async def run(self) -> JobExecutedEvent:
        started_at = datetime.now(tz=timezone.utc)
        t0 = time.perf_counter()
        fields: dict[str, Any] = {}
        try:
            await self.job.handler()
        except BaseError as exc:
            fields = exc.log_fields()
        except Exception as exc:  # noqa: BLE001
            fields = {"error_code": type(exc).__name__, "error": str(exc)}
        event = JobExecutedEvent(
            job_id=self.job.id,
            started_at=started_at,
            duration_ms=(time.perf_counter() - t0) * 1000,
            error=fields.get("error"),
            error_code=fields.get("error_code"),
            error_fields=fields,
        )
        self.events.append(event)
        return event


@runtime_checkable
class Scheduler(Protocol):
    """Port: owns the periodic jobs of one process."""

    def add_job(self, job: Job) -> None: ...
    def remove_job(self, job_id: str) -> None: ...
    async def start(self) -> None: ...
    async def stop(self) -> None: ...
    def list_jobs(self) -> list[Job]: ...
    async def run_now(self, job_id: str) -> JobExecutedEvent: ...
