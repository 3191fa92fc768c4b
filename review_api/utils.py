"""Utility functions for the API."""

from pathlib import Path
from typing import List, Tuple

from fastapi import HTTPException

from component_linter.issue import ConfigError

from .schemas import CheckRequest, IssueOut
from .services import CheckerService

checker_svc = CheckerService()


def run_check(req: CheckRequest) -> Tuple[List[IssueOut], str]:
    """Run checker. Returns (issues, label of the checked file)."""
    try:
        if req.file_path:
            p = Path(req.file_path)
            if not p.is_absolute():
                raise HTTPException(400, "file_path must be absolute")
            if not p.exists():
                raise HTTPException(404, f"File not found: {req.file_path}")
            return checker_svc.analyze_file(p, req.thresholds), str(p)
        if req.code is not None and req.filename:
            return checker_svc.analyze_code(req.code, req.filename, req.thresholds), req.filename
    except ConfigError as e:
        raise HTTPException(422, str(e)) from e
    raise HTTPException(
        400,
        "Provide either (code + filename) or file_path.",
    )
