# talentx/services/analysis/pipeline.py
"""
AI request pipeline.

run_analysis(request) -> AnalysisResult

Flow per task:
  instruction + prompt -> adapter.generate -> parse_model_reply -> normalize

Every failure path (no credential, remote error, malformed reply, a
normalizer choking on an odd shape) is folded into the returned result's
feedback. Only cancellation propagates, so the request tracker can discard
superseded calls.
"""

import logging
from types import ModuleType
from typing import Optional

from talentx.models.analysis import AnalysisRequest, AnalysisResult, AnalysisTask
from talentx.services.analysis.parsing import ReplyParseError, parse_model_reply
from talentx.services.analysis.tasks import TASKS
from talentx.services.llm_adapter import get_adapter

logger = logging.getLogger(__name__)

NOT_CONFIGURED_FEEDBACK = "Gemini API not configured. Please set API_KEY."


async def run_analysis(request: AnalysisRequest, adapter: Optional[ModuleType] = None) -> AnalysisResult:
    definition = TASKS[request.task]
    adapter = adapter or get_adapter()

    if not adapter.is_configured():
        logger.warning("LLM adapter not configured; skipping %s", request.task.value)
        return AnalysisResult(feedback=NOT_CONFIGURED_FEEDBACK)

    try:
        raw = await adapter.generate(
            definition.instruction(request),
            definition.build_prompt(request),
            definition.temperature,
            task=request.task.value,
        )
    except Exception as exc:
        logger.exception("LLM call failed for %s", request.task.value)
        return AnalysisResult(feedback=f"{definition.error_prefix}: {exc}")

    parsed = parse_model_reply(raw)
    if isinstance(parsed, ReplyParseError):
        return AnalysisResult(feedback=f"Error processing response: {parsed.reason}. Raw: {parsed.raw_text}")

    try:
        return definition.normalize(parsed.fields)
    except Exception as exc:
        logger.exception("Could not normalize %s reply", request.task.value)
        return AnalysisResult(feedback=f"{definition.error_prefix}: {exc}")


async def analyze_resume(resume_text: str, adapter: Optional[ModuleType] = None) -> AnalysisResult:
    return await run_analysis(AnalysisRequest(task=AnalysisTask.RESUME_CRITIQUE, primary_text=resume_text), adapter)


async def percentage_match(resume_text: str, job_description: str, adapter: Optional[ModuleType] = None) -> AnalysisResult:
    req = AnalysisRequest(task=AnalysisTask.PERCENTAGE_MATCH, primary_text=resume_text, secondary_text=job_description)
    return await run_analysis(req, adapter)


async def ats_score(resume_text: str, adapter: Optional[ModuleType] = None) -> AnalysisResult:
    return await run_analysis(AnalysisRequest(task=AnalysisTask.ATS_SCORE, primary_text=resume_text), adapter)


async def mock_interview_questions(job_role: str, adapter: Optional[ModuleType] = None) -> AnalysisResult:
    req = AnalysisRequest(task=AnalysisTask.MOCK_INTERVIEW_QUESTIONS, secondary_text=job_role)
    return await run_analysis(req, adapter)


async def resume_suggestions(resume_text: str, adapter: Optional[ModuleType] = None) -> AnalysisResult:
    return await run_analysis(AnalysisRequest(task=AnalysisTask.RESUME_SUGGESTIONS, primary_text=resume_text), adapter)
