"""Search Agent feed: calls the AI search agent, validates its payload, tracks fetch state."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, List, Optional

from pydantic import ValidationError

from job_scout.config import AGENT_ID, SEARCH_QUERY
from job_scout.schemas.agent_result import AgentResult
from job_scout.schemas.job import Job, JobResponse
from job_scout.schemas.state import FetchState
from job_scout.services.agent_service import call_agent
from job_scout.utils.helpers import parse_agent_json
from job_scout.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_FETCH_ERROR = "Failed to fetch jobs"
UNKNOWN_ERROR = "Unknown error occurred"

Transport = Callable[[str, str], Awaitable[AgentResult]]


class AgentResponseError(Exception):
    """The agent answered, but not with a usable success payload."""


def _payload(result: AgentResult) -> Optional[dict]:
    """Agent payload as a dict; string payloads are parsed as (possibly fenced) JSON."""
    response = result.response
    if isinstance(response, str):
        response = parse_agent_json(response)
    return response if isinstance(response, dict) else None


def _failure_message(result: AgentResult, payload: Optional[dict]) -> str:
    """Most specific message available: payload message, then transport error, then generic."""
    message = payload.get("message") if payload else None
    if isinstance(message, str) and message.strip():
        return message
    if result.error:
        return result.error
    return DEFAULT_FETCH_ERROR


def parse_jobs(items: List[Any]) -> List[Job]:
    """Validate raw job entries. Entries that are not job objects are skipped."""
    jobs: List[Job] = []
    for position, item in enumerate(items):
        if not isinstance(item, dict):
            logger.warning("Skipping job entry %s: expected an object, got %s", position, type(item).__name__)
            continue
        try:
            jobs.append(Job.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping job entry %s: %s", position, e)
    return jobs


def normalize_agent_result(result: AgentResult) -> List[Job]:
    """
    Turn a transport result into the job collection.
    Raises AgentResponseError for failure envelopes, non-success status
    or payloads that do not match the job response shape.
    """
    payload = _payload(result)
    if not result.success or payload is None or payload.get("status") != "success":
        raise AgentResponseError(_failure_message(result, payload))
    try:
        response = JobResponse.model_validate(payload)
    except ValidationError as e:
        logger.warning("Agent payload did not match job response schema: %s", e)
        raise AgentResponseError(DEFAULT_FETCH_ERROR) from e
    return parse_jobs(response.result.jobs)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class JobFeed:
    """
    Owns the job collection and its fetch state.
    Each successful refresh replaces the collection wholesale; a failed one
    leaves it untouched and records the error message.
    """

    def __init__(
        self,
        transport: Transport = call_agent,
        query: str = SEARCH_QUERY,
        agent_id: str = AGENT_ID,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self._transport = transport
        self._query = query
        self._agent_id = agent_id
        self._clock = clock or _utc_now
        self.jobs: List[Job] = []
        self.state = FetchState()

    async def refresh(self) -> None:
        """
        Run one search. Overlapping calls are not cancelled: whichever
        response resolves last decides the final jobs and state.
        """
        self.state.loading = True
        self.state.error = None
        logger.info("Refreshing jobs from agent %s", self._agent_id)
        try:
            result = await self._transport(self._query, self._agent_id)
            jobs = normalize_agent_result(result)
        except AgentResponseError as e:
            self.state.error = str(e)
            logger.warning("Agent returned a failure: %s", e)
        except Exception as e:
            self.state.error = str(e) or UNKNOWN_ERROR
            logger.exception("Agent request failed: %s", e)
        else:
            self.jobs = jobs
            self.state.last_updated = self._clock()
            logger.info("Refresh finished: %s jobs", len(jobs))
        finally:
            self.state.loading = False

    def refresh_blocking(self) -> None:
        """Run refresh() to completion from synchronous code (the Streamlit script)."""
        loop = asyncio.new_event_loop()
        asyncio.set_event_loop(loop)
        try:
            loop.run_until_complete(self.refresh())
        finally:
            loop.close()
