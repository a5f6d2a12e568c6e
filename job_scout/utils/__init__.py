"""Utility exports."""

from .date_parser import (
    age_in_days,
    classify_recency,
    format_relative_date,
    is_job_new,
    parse_posted_date,
)
from .helpers import (
    available_locations,
    job_item_key,
    parse_agent_json,
    pluralize,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "age_in_days",
    "classify_recency",
    "format_relative_date",
    "is_job_new",
    "parse_posted_date",
    "available_locations",
    "job_item_key",
    "parse_agent_json",
    "pluralize",
]
