"""Helper utilities for the Job Scout app."""

import json
import re
from typing import Any, Iterable, List, Optional

from job_scout.schemas.job import Job


def available_locations(jobs: Iterable[Job]) -> List[str]:
    """Sorted, duplicate-free list of non-empty job locations."""
    return sorted({job.location for job in jobs if job.location})


def job_item_key(job: Job, position: int) -> str:
    """Render identity for a list item. Position keeps duplicate links distinct."""
    return f"{job.link}-{position}"


def pluralize(count: int, noun: str) -> str:
    """'1 job', '3 jobs'."""
    return f"{count} {noun}{'' if count == 1 else 's'}"


def parse_agent_json(text: str) -> Optional[Any]:
    """Parse JSON from an agent response, stripping markdown code blocks if present."""
    raw = text.strip()
    if raw.startswith("```"):
        raw = re.sub(r"^```(?:json)?\s*", "", raw)
        raw = re.sub(r"\s*```$", "", raw)
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return None
