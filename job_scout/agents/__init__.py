"""Agent exports."""

from .search_agent import AgentResponseError, JobFeed, normalize_agent_result, parse_jobs

__all__ = ["JobFeed", "AgentResponseError", "normalize_agent_result", "parse_jobs"]
