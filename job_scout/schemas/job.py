"""Job posting schema as returned by the search agent."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from job_scout.config import SALARY_NOT_SPECIFIED


class Job(BaseModel):
    """A single job posting. Immutable once received; `link` is its identity key."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(default="", description="Job title")
    company: str = Field(default="", description="Company or employer name")
    location: str = Field(default="", description="Job location; empty means unspecified")
    posted_date: str = Field(default="", alias="postedDate", description="Posting timestamp as sent by the agent")
    salary_range: str = Field(default="", alias="salaryRange", description="Salary range or 'Not specified'")
    link: str = Field(default="", description="External URL of the posting")
    description: str = Field(default="", description="Free-text description")

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        """Agents send nulls and numbers for text fields; normalize to strings."""
        if value is None:
            return ""
        if isinstance(value, (list, dict)):
            raise ValueError("expected a text value")
        return str(value)

    @property
    def display_salary(self) -> Optional[str]:
        """Salary for display, or None when absent or the 'not specified' sentinel."""
        salary = self.salary_range.strip()
        if not salary or salary == SALARY_NOT_SPECIFIED:
            return None
        return salary


class JobResult(BaseModel):
    jobs: List[Any] = Field(default_factory=list)

    @field_validator("jobs", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class JobResponse(BaseModel):
    """Success payload of the search agent: {status, result: {jobs}, metadata?}."""

    status: str = Field(..., description="'success' or 'error'")
    result: JobResult = Field(default_factory=JobResult)
    message: Optional[str] = Field(default=None, description="Error message on failure payloads")
    metadata: Optional[dict] = Field(default=None, description="Agent metadata; informational only")

    @field_validator("result", mode="before")
    @classmethod
    def _none_result(cls, value: Any) -> Any:
        return {} if value is None else value
