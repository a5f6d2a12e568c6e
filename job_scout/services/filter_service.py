"""Filter jobs by keyword, location and posting date. No UI logic; used by app layer."""

from datetime import datetime
from typing import AbstractSet, List, Optional, Sequence

from job_scout.config import WEEK_FILTER_DAYS
from job_scout.schemas.job import Job
from job_scout.schemas.state import DateFilter, FilterState
from job_scout.utils.date_parser import age_in_days, is_job_new, resolve_now
from job_scout.utils.helpers import available_locations

__all__ = [
    "available_locations",
    "filter_jobs",
    "matches_date",
    "matches_keyword",
    "matches_location",
]


def matches_keyword(job: Job, keyword: str) -> bool:
    """Case-insensitive substring match on title, company, description or location."""
    if not keyword:
        return True
    needle = keyword.lower()
    return any(
        needle in field.lower()
        for field in (job.title, job.company, job.description, job.location)
    )


def matches_location(job: Job, selected: AbstractSet[str]) -> bool:
    """Exact, case-sensitive membership. An empty selection passes every job."""
    if not selected:
        return True
    return job.location in selected


def matches_date(job: Job, date_filter: DateFilter, now: Optional[datetime] = None) -> bool:
    """
    ALL passes everything. TODAY keeps jobs posted in the last 24 hours.
    WEEK keeps jobs at most 7 days old; unparseable dates are excluded.
    """
    if date_filter == DateFilter.TODAY:
        return is_job_new(job.posted_date, now)
    if date_filter == DateFilter.WEEK:
        days = age_in_days(job.posted_date, now)
        return days is not None and days <= WEEK_FILTER_DAYS
    return True


def filter_jobs(
    jobs: Sequence[Job],
    state: FilterState,
    now: Optional[datetime] = None,
) -> List[Job]:
    """
    Apply all active filters (AND). Does not mutate the input list;
    matching jobs keep their original order.
    """
    if not state.is_active:
        return list(jobs)
    now = resolve_now(now)
    return [
        job for job in jobs
        if matches_keyword(job, state.search_keyword)
        and matches_location(job, state.location_filter)
        and matches_date(job, state.date_filter, now)
    ]
