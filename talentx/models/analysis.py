# talentx/models/analysis.py
"""
Request/result shapes of the AI resume tools.

AnalysisResult is what every pipeline call returns, whatever happened on the
wire: callers only check which optional fields are populated.
"""
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AnalysisInputError(ValueError):
    """Required text for a task is missing; the pipeline is never invoked."""


class AnalysisTask(str, Enum):
    # values are the service ids the front end already uses
    RESUME_CRITIQUE = "resumeAnalyzer"
    PERCENTAGE_MATCH = "percentageMatch"
    ATS_SCORE = "atsScoreCalculator"
    MOCK_INTERVIEW_QUESTIONS = "aiMockInterviewQuestions"
    RESUME_SUGGESTIONS = "resumeSuggestions"

    @property
    def title(self) -> str:
        return _TITLES[self]

    @property
    def needs_resume(self) -> bool:
        return self is not AnalysisTask.MOCK_INTERVIEW_QUESTIONS


_TITLES = {
    AnalysisTask.RESUME_CRITIQUE: "Resume Analyzer",
    AnalysisTask.PERCENTAGE_MATCH: "Percentage Match",
    AnalysisTask.ATS_SCORE: "ATS Score Calculator",
    AnalysisTask.MOCK_INTERVIEW_QUESTIONS: "AI Mock Interview Questions",
    AnalysisTask.RESUME_SUGGESTIONS: "AI Resume Suggestions",
}


class AnalysisRequest(BaseModel):
    task: AnalysisTask
    primary_text: str = ""
    # job description for PERCENTAGE_MATCH, job role / industry for MOCK_INTERVIEW_QUESTIONS
    secondary_text: Optional[str] = None

    def validate_inputs(self) -> "AnalysisRequest":
        title = self.task.title
        if self.task.needs_resume and not self.primary_text.strip():
            raise AnalysisInputError(f"Please upload or paste your resume for {title}.")
        secondary = (self.secondary_text or "").strip()
        if self.task is AnalysisTask.MOCK_INTERVIEW_QUESTIONS and not secondary:
            raise AnalysisInputError(f"Please provide the job role/industry for {title}.")
        if self.task is AnalysisTask.PERCENTAGE_MATCH and not secondary:
            raise AnalysisInputError(f"Please provide the job description for {title}.")
        return self


class AtsParameterScore(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    parameter_name: str
    score: Optional[float] = None  # 0-100
    status: Optional[str] = None  # e.g. "Strong Match", "Needs Improvement"
    feedback: str = ""
    recommendation: Optional[str] = None


class AnalysisResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    feedback: str
    suggestions: List[str] = Field(default_factory=list)
    overall_score: Optional[float] = None
    detailed_breakdown: List[AtsParameterScore] = Field(default_factory=list)
