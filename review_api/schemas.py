"""Pydantic request/response models."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class Thresholds(BaseModel):
    """Per-request overrides for the configured lint thresholds."""

    max_file_lines: Optional[int] = Field(default=None, gt=0)
    max_function_lines: Optional[int] = Field(default=None, gt=0)
    max_params: Optional[int] = Field(default=None, gt=0)
    max_constant_lines: Optional[int] = Field(default=None, gt=0)
    max_jsx_lines: Optional[int] = Field(default=None, gt=0)
    max_state_hooks: Optional[int] = Field(default=None, gt=0)

    model_config = {"extra": "forbid"}


class CheckRequest(BaseModel):
    """Either code + filename, or an absolute file_path on the server."""

    code: Optional[str] = None
    filename: Optional[str] = Field(default=None, description="Path used for folder/extension routing, e.g. src/components/Card.tsx")
    file_path: Optional[str] = Field(default=None, description="Absolute path to a source file on the server")
    thresholds: Optional[Thresholds] = None


class SourceIn(BaseModel):
    """One file in a batch request."""

    code: str = Field(..., description="File content")
    filename: str = Field(..., description="Path used for folder/extension routing")


class BatchCheckRequest(BaseModel):
    """Several files checked with the same thresholds."""

    files: List[SourceIn] = Field(default_factory=list)
    thresholds: Optional[Thresholds] = None


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single lint issue."""

    line: int
    message: str
    severity: str = Field(..., description="warn or error")
    category: str
    file_level: bool = Field(default=False, description="True for per-file summary issues")
    file_path: Optional[str] = Field(default=None, description="File path this issue belongs to")


# --- Responses ---


class CheckResponse(BaseModel):
    """Response for POST /check."""

    issues: List[IssueOut] = Field(default_factory=list)
    summary: Dict[str, int] = Field(default_factory=dict, description="Issue count per category")


class FileIssues(BaseModel):
    """Issues found in a single file."""

    file_path: str
    issues: List[IssueOut] = Field(default_factory=list)


class BatchCheckResponse(BaseModel):
    """Response for POST /check/batch."""

    files: List[FileIssues] = Field(default_factory=list)
