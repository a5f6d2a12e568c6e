"""Schema exports."""

from .agent_result import AgentResult
from .job import Job, JobResponse
from .state import DateFilter, FetchState, FilterState, Recency

__all__ = [
    "AgentResult",
    "Job",
    "JobResponse",
    "DateFilter",
    "FetchState",
    "FilterState",
    "Recency",
]
