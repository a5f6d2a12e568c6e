"""Envelope returned by the search transport."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class AgentResult(BaseModel):
    """Result of one call to the search agent, successful or not."""

    success: bool = Field(..., description="False on transport or agent failure")
    response: Any = Field(default=None, description="Agent payload: dict, JSON string, or None")
    error: Optional[str] = Field(default=None, description="Transport-level error message")
