"""Search transport: one HTTP call to the AI search agent endpoint."""

from typing import Any, Dict, Optional

import httpx

from job_scout.config import AGENT_API_KEY, AGENT_API_URL, HTTP_TIMEOUT_SECONDS
from job_scout.schemas.agent_result import AgentResult
from job_scout.utils.logger import get_logger

logger = get_logger(__name__)


def _headers(api_key: str) -> Dict[str, str]:
    headers = {"Accept": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def _to_result(body: Any) -> AgentResult:
    """A body carrying 'success' is already an envelope; anything else is the agent payload."""
    if isinstance(body, dict) and "success" in body:
        return AgentResult(
            success=bool(body.get("success")),
            response=body.get("response"),
            error=body.get("error"),
        )
    return AgentResult(success=True, response=body)


def _decode(response: httpx.Response) -> Optional[Any]:
    try:
        return response.json()
    except ValueError:
        return None


async def call_agent(
    message: str,
    agent_id: str,
    *,
    url: str = AGENT_API_URL,
    api_key: str = AGENT_API_KEY,
    client: Optional[httpx.AsyncClient] = None,
) -> AgentResult:
    """
    Send the search prompt to the agent and return its result envelope.
    HTTP error statuses become a failed AgentResult; network errors
    (httpx.RequestError) propagate to the caller.
    """
    payload = {"message": message, "agent_id": agent_id}
    owns_client = client is None
    if owns_client:
        client = httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS)
    try:
        response = await client.post(url, json=payload, headers=_headers(api_key))
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        logger.error("Agent HTTP error: %s %s", e.response.status_code, e.response.text[:200])
        body = _decode(e.response)
        if isinstance(body, dict) and "success" in body:
            return _to_result(body)
        return AgentResult(
            success=False,
            error=f"HTTP {e.response.status_code}: {e.response.reason_phrase}",
        )
    finally:
        if owns_client:
            await client.aclose()

    body = _decode(response)
    if body is None:
        # Agents sometimes answer with raw text; the feed tries to parse it.
        return AgentResult(success=True, response=response.text)
    logger.info("Agent %s responded (%s bytes)", agent_id, len(response.content))
    return _to_result(body)
