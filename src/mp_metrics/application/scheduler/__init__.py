"""Application scheduler – periodic job scheduling and in-memory fake."""
from mp_metrics.application.scheduler.job import Job
from mp_metrics.application.scheduler.scheduler import (
    JobExecutedEvent,
    JobExecutionContext,
    Scheduler,
)
from mp_metrics.application.scheduler.in_memory import InMemoryScheduler
from mp_metrics.application.scheduler.interval import IntervalScheduler

__all__ = [
    "InMemoryScheduler",
    "IntervalScheduler",
    "Job",
    "JobExecutedEvent",
    "JobExecutionContext",
    "Scheduler",
]
