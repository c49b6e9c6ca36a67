"""Pydantic models for request and response bodies."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class ExecuteRequest(BaseModel):
    """Request body for executing a snippet."""

    language: str = Field(
        ...,
        description="One of 'javascript', 'python', 'csharp', 'java', 'cpp' (case-insensitive).",
    )
    code: str = Field(..., description="Source code to execute.")
    input: List[str] = Field(
        default_factory=lambda: [""],
        description="Lines passed on standard input. Only used for C#.",
    )


class RunRequest(ExecuteRequest):
    """Request body for the structured endpoint."""

    entry_point: Optional[str] = Field(
        default=None,
        description="Class to launch for Java. Detected from the code when omitted.",
    )


class RunResponse(BaseModel):
    """Structured execution outcome."""

    ok: bool
    output: str
    error_kind: Optional[str] = None
    duration_ms: int
