"""Application scheduler – InMemoryScheduler for unit tests."""
from __future__ import annotations

from mp_metrics.application.scheduler.job import Job
from mp_metrics.application.scheduler.scheduler import JobExecutedEvent, JobExecutionContext

__all__ = ["InMemoryScheduler"]


class InMemoryScheduler:
    """Scheduler double with no timers: tests advance it by hand.

    ``tick()`` stands in for one elapsed interval of every enabled job;
    ``run_now(job_id)`` fires a single job.  Every run lands in
    ``execution_log``.
    """

    def __init__(self) -> None:
        self._jobs: dict[str, Job] = {}
        self.is_running = False
        self.execution_log: list[JobExecutedEvent] = []

    def add_job(self, job: Job) -> None:
        self._jobs[job.id] = job

    def remove_job(self, job_id: str) -> None:
        self._jobs.pop(job_id, None)

    def list_jobs(self) -> list[Job]:
        return list(self._jobs.values())

    async def start(self) -> None:
        self.is_running = True

    async def stop(self) -> None:
        self.is_running = False

    async def run_now(self, job_id: str) -> JobExecutedEvent:
        event = await JobExecutionContext(job=self._jobs[job_id]).run()
        self.execution_log.append(event)
        return event

    async def tick(self) -> list[JobExecutedEvent]:
        """Fire every enabled job once, in registration order."""
        return [await self.run_now(job.id) for job in self.list_jobs() if job.enabled]

    def runs_of(self, job_id: str) -> list[JobExecutedEvent]:
        return [event for event in self.execution_log if event.job_id == job_id]
