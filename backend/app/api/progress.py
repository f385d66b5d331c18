from fastapi import APIRouter, Depends, HTTPException, Query, Request

from ..engine import ProgressService
from ..schemas import CaseProgressResponse, ProgressSummaryResponse

router = APIRouter(prefix="/api/cases", tags=["progress"])


def get_progress_service(request: Request) -> ProgressService:
    return request.app.state.progress_service


@router.get("/progress/summary", response_model=ProgressSummaryResponse)
def progress_summary(
    case_id: list[str] = Query(default=[]),
    service: ProgressService = Depends(get_progress_service),
):
    summary = service.summarize(case_id)
    return ProgressSummaryResponse(
        cases={
            cid: CaseProgressResponse.from_progress(p)
            for cid, p in summary.cases.items()
        },
        missing=list(summary.missing),
        average_progress=summary.average_progress,
    )


@router.get("/{case_id}/progress", response_model=CaseProgressResponse)
def case_progress(
    case_id: str,
    service: ProgressService = Depends(get_progress_service),
):
    progress = service.get_case_progress(case_id)
    if progress is None:
        raise HTTPException(status_code=404, detail="Case not found")
    return CaseProgressResponse.from_progress(progress)
