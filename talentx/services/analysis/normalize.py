# talentx/services/analysis/normalize.py
"""
Per-task mapping from the model's JSON object to AnalysisResult.

Nothing in the decoded object is trusted: every field goes through a
coercion helper with an explicit default, so a reply with missing or
oddly-typed fields still produces a well-formed result.
"""

import math
import re
from typing import Any, Dict, List, Optional

from talentx.models.analysis import AnalysisResult, AtsParameterScore

_PERCENT_RE = re.compile(r"^\s*(\d+(?:\.\d+)?)\s*%?\s*$")


def _as_str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value if value.strip() else default
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return default


def _as_str_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    out = []
    for item in value:
        s = _as_str(item)
        if s:
            out.append(s)
    return out


def _as_score(value: Any) -> Optional[float]:
    """85, 85.5, "85", "85%" -> clamped 0-100; anything else -> None."""
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, int):
        num = float(max(0, min(100, value)))
    elif isinstance(value, float):
        num = value
    elif isinstance(value, str):
        m = _PERCENT_RE.match(value)
        if not m:
            return None
        num = float(m.group(1))
    else:
        return None
    if not math.isfinite(num):
        return None
    num = max(0.0, min(100.0, num))
    return int(num) if num.is_integer() else num


def _display_score(value: Optional[float]) -> str:
    return "N/A" if value is None else str(value)


def normalize_resume_critique(fields: Dict[str, Any]) -> AnalysisResult:
    return AnalysisResult(
        feedback=_as_str(fields.get("feedback"), "No feedback provided."),
        suggestions=_as_str_list(fields.get("suggestions")),
    )


def normalize_percentage_match(fields: Dict[str, Any]) -> AnalysisResult:
    score = _as_score(fields.get("matchScore"))
    detail = _as_str(fields.get("feedback"), "No detailed feedback.")
    suggestions = []
    matching = _as_str_list(fields.get("matchingElements"))
    missing = _as_str_list(fields.get("missingElements"))
    if matching:
        suggestions.append(f"Matching: {', '.join(matching)}")
    if missing:
        suggestions.append(f"Missing: {', '.join(missing)}")
    return AnalysisResult(
        feedback=f"Match Score: {_display_score(score)}%\n\n{detail}",
        suggestions=suggestions,
        overall_score=score,
    )


def _parameter_entry(entry: Any, index: int) -> AtsParameterScore:
    if not isinstance(entry, dict):
        # keep the slot so positions line up with the reply
        return AtsParameterScore(parameter_name=f"Parameter {index + 1}", feedback=_as_str(entry))
    return AtsParameterScore(
        parameter_name=_as_str(entry.get("parameterName") or entry.get("name"), f"Parameter {index + 1}"),
        score=_as_score(entry.get("score")),
        status=_as_str(entry.get("status")) or None,
        feedback=_as_str(entry.get("feedback")),
        recommendation=_as_str(entry.get("recommendation")) or None,
    )


def normalize_ats_score(fields: Dict[str, Any]) -> AnalysisResult:
    raw_score = fields.get("overallScore", fields.get("atsScore"))
    score = _as_score(raw_score)
    detail = _as_str(fields.get("feedback"), "No detailed feedback.")
    if score is None and _as_str(raw_score):
        # categorical estimate such as "Medium"
        feedback = f"ATS Score Estimate: {_as_str(raw_score)}\n\n{detail}"
    else:
        feedback = detail

    breakdown = []
    raw_breakdown = fields.get("parameterBreakdown")
    if isinstance(raw_breakdown, list):
        for i, entry in enumerate(raw_breakdown):
            breakdown.append(_parameter_entry(entry, i))

    return AnalysisResult(
        feedback=feedback,
        suggestions=_as_str_list(fields.get("suggestions")),
        overall_score=score,
        detailed_breakdown=breakdown,
    )


def normalize_mock_interview_questions(fields: Dict[str, Any]) -> AnalysisResult:
    questions = _as_str_list(fields.get("questions"))
    return AnalysisResult(
        feedback=_as_str(fields.get("feedback"), "Generated questions:"),
        suggestions=questions or ["No questions generated."],
    )


def normalize_resume_suggestions(fields: Dict[str, Any]) -> AnalysisResult:
    return AnalysisResult(
        feedback=_as_str(fields.get("feedback"), "Suggestions for your resume:"),
        suggestions=_as_str_list(fields.get("suggestions")),
    )
