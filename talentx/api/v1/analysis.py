# talentx/api/v1/analysis.py
"""
AI resume tools.

POST /analysis/{service_id} validates the inputs, then runs the pipeline
under the app's request tracker. The pipeline itself never fails; the only
non-200 outcomes are invalid input (400), unknown service (404) and a
request superseded by /services/reset or another selection (409).
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from talentx.models.analysis import AnalysisInputError, AnalysisRequest, AnalysisResult, AnalysisTask
from talentx.services.analysis.pipeline import run_analysis
from talentx.services.analysis.requests import AnalysisRequestTracker, StaleRequestError
from talentx.services.analysis.tasks import SERVICE_TASKS, TASKS

logger = logging.getLogger(__name__)

router = APIRouter()


class ServiceOut(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str
    needs_resume: bool
    secondary_label: Optional[str] = None


class AnalysisIn(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    resume_text: str = ""
    # job description or job role, depending on the service
    secondary_text: Optional[str] = None


class ResetOut(BaseModel):
    generation: int


_SECONDARY_LABELS = {
    AnalysisTask.PERCENTAGE_MATCH: "Job Description",
    AnalysisTask.MOCK_INTERVIEW_QUESTIONS: "Job Role / Industry",
}


def get_tracker(request: Request) -> AnalysisRequestTracker:
    tracker = getattr(request.app.state, "tracker", None)
    if tracker is None:
        tracker = request.app.state.tracker = AnalysisRequestTracker()
    return tracker


def _service_task(service_id: str) -> AnalysisTask:
    try:
        task = AnalysisTask(service_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown service: {service_id}")
    if task not in SERVICE_TASKS:
        raise HTTPException(status_code=404, detail=f"Unknown service: {service_id}")
    return task


@router.get("/services", response_model=List[ServiceOut])
async def list_services():
    return [
        ServiceOut(
            id=task.value,
            title=task.title,
            description=TASKS[task].description,
            needs_resume=task.needs_resume,
            secondary_label=_SECONDARY_LABELS.get(task),
        )
        for task in SERVICE_TASKS
    ]


@router.post("/services/reset", response_model=ResetOut)
async def reset_workspace(tracker: AnalysisRequestTracker = Depends(get_tracker)):
    return ResetOut(generation=tracker.advance())


@router.post("/analysis/{service_id}", response_model=AnalysisResult)
async def analyze(service_id: str, payload: AnalysisIn, tracker: AnalysisRequestTracker = Depends(get_tracker)):
    task = _service_task(service_id)
    req = AnalysisRequest(task=task, primary_text=payload.resume_text, secondary_text=payload.secondary_text)
    try:
        req.validate_inputs()
    except AnalysisInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    try:
        return await tracker.run(run_analysis(req))
    except StaleRequestError as exc:
        logger.info("Dropping %s result: %s", service_id, exc)
        raise HTTPException(status_code=409, detail="Request superseded by a newer selection")
