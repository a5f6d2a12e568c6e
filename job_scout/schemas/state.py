"""State containers for the job view: filters, fetch status, recency."""

from datetime import datetime
from enum import Enum
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field


class DateFilter(str, Enum):
    ALL = "all"
    TODAY = "today"
    WEEK = "week"


class FilterState(BaseModel):
    """User filter selections. Input to the filter engine; never mutates jobs."""

    model_config = ConfigDict(frozen=True)

    search_keyword: str = ""
    location_filter: FrozenSet[str] = Field(default_factory=frozenset)
    date_filter: DateFilter = DateFilter.ALL

    @property
    def is_active(self) -> bool:
        return bool(self.search_keyword or self.location_filter or self.date_filter != DateFilter.ALL)

    def cleared(self) -> "FilterState":
        return FilterState()


class FetchState(BaseModel):
    """Load/error/success status of the job feed."""

    loading: bool = False
    error: Optional[str] = None
    last_updated: Optional[datetime] = None


class Recency(BaseModel):
    """Relative-age label and 'new' flag for a posting date."""

    label: str
    is_new: bool
