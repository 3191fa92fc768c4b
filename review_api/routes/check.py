"""Check routes (rule-based analysis)."""

from fastapi import APIRouter, HTTPException
from fastapi.responses import PlainTextResponse

from component_linter.issue import ConfigError

from ..report_formatter import format_text_report
from ..schemas import BatchCheckRequest, BatchCheckResponse, CheckRequest, CheckResponse
from ..utils import checker_svc, run_check

router = APIRouter()


@router.post("/check", response_model=CheckResponse)
def check(req: CheckRequest) -> CheckResponse:
    """Lint one file and return its issues."""
    issues, _ = run_check(req)
    return CheckResponse(issues=issues, summary=checker_svc.summarize(issues))


@router.post("/check/report", response_class=PlainTextResponse)
def check_report(req: CheckRequest) -> PlainTextResponse:
    """Lint one file and return a Markdown report for a review comment."""
    issues, label = run_check(req)
    return PlainTextResponse(format_text_report(label, issues), media_type="text/markdown")


@router.post("/check/batch", response_model=BatchCheckResponse)
def check_batch(req: BatchCheckRequest) -> BatchCheckResponse:
    """Lint several in-memory files with the same thresholds."""
    try:
        files = checker_svc.analyze_sources(req.files, req.thresholds)
    except ConfigError as e:
        raise HTTPException(422, str(e)) from e
    return BatchCheckResponse(files=files)
