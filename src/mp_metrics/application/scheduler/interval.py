"""Application scheduler – IntervalScheduler: asyncio loops with a stop event."""
from __future__ import annotations

import asyncio
from typing import Any

from mp_metrics.application.scheduler.job import Job
from mp_metrics.application.scheduler.scheduler import JobExecutedEvent, JobExecutionContext

__all__ = ["IntervalScheduler"]


class IntervalScheduler:
    """Run every enabled job on its own interval until :meth:`stop`.

    Each job gets one task that waits for either the stop event or its
    interval to elapse, whichever comes first.  A failed run is logged as
    ``job_failed`` and the loop carries on with the next tick.
    """

    def __init__(self, logger: Any) -> None:
        self._log = logger.bind(component="scheduler")
        self._jobs: dict[str, Job] = {}
        self._tasks: dict[str, asyncio.Task[None]] = {}
        self._stop_event: asyncio.Event | None = None

    def add_job(self, job: Job) -> None:
        self._jobs[job.id] = job
        if self._stop_event is not None and job.enabled:
            self._spawn(job, self._stop_event)

    def remove_job(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)
        task = self._tasks.pop(job_id, None)
        if task is not None:
            task.cancel()

    def list_jobs(self) -> list[Job]:
        return list(self._jobs.values())

    @property
    def is_running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    async def start(self) -> None:
        if self.is_running:
            return
        stop_event = self._stop_event = asyncio.Event()
        for job in self._jobs.values():
            if job.enabled:
                self._spawn(job, stop_event)
        self._log.info("scheduler_started", jobs=sorted(self._tasks))

    async def stop(self) -> None:
        if self._stop_event is None:
            return
        self._stop_event.set()
        tasks = list(self._tasks.values())
        self._tasks.clear()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._stop_event = None
        self._log.info("scheduler_stopped")

    async def run_now(self, job_id: str) -> JobExecutedEvent:
        """Fire *job_id* immediately, outside its interval."""
        return await self._execute(self._jobs[job_id])

    def _spawn(self, job: Job, stop_event: asyncio.Event) -> None:
        self._tasks[job.id] = asyncio.create_task(self._loop(job, stop_event), name=f"job:{job.id}")

    async def _loop(self, job: Job, stop_event: asyncio.Event) -> None:
        while not stop_event.is_set():
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=job.interval_seconds)
            except asyncio.TimeoutError:
                await self._execute(job)

    async def _execute(self, job: Job) -> JobExecutedEvent:
        event = await JobExecutionContext(job=job).run()
        if event.success:
            self._log.debug("job_executed", job_id=job.id, duration_ms=round(event.duration_ms, 3))
        else:
            self._log.error("job_failed", job_id=job.id, **event.error_fields)
        return event
