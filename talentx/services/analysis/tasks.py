# talentx/services/analysis/tasks.py
"""
Instruction templates, prompt builders and per-task settings.

Scoring tasks run at a low temperature so repeated runs agree; the question
generator runs hotter so practice sessions vary.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict

from talentx.models.analysis import AnalysisRequest, AnalysisResult, AnalysisTask
from talentx.services.analysis import normalize


@dataclass(frozen=True)
class TaskDefinition:
    task: AnalysisTask
    instruction: Callable[[AnalysisRequest], str]
    build_prompt: Callable[[AnalysisRequest], str]
    temperature: float
    error_prefix: str
    normalize: Callable[[Dict[str, Any]], AnalysisResult]
    description: str = ""


def _fenced(label: str, text: str) -> str:
    return f"{label}:\n```\n{text}\n```"


RESUME_CRITIQUE_INSTRUCTION = """You are an expert resume reviewer. Analyze the provided resume text.
Provide feedback on:
1. Structure and Formatting (clarity, readability, ATS-friendliness).
2. Content (achievements, action verbs, conciseness, impact).
3. Keywords (relevance to common job roles, missing critical keywords).
4. Common Errors (typos, grammar, inconsistencies).
Return your feedback as a JSON object with a main "feedback" string (can be markdown formatted) and an optional "suggestions" array of strings for specific improvement points.
Example JSON:
{
  "feedback": "Overall, this is a good start... However, consider these points for improvement: ...",
  "suggestions": ["Quantify achievements more.", "Use stronger action verbs for XYZ section."]
}"""

PERCENTAGE_MATCH_INSTRUCTION = """You are an AI that calculates a percentage match between a resume and a job description.
Analyze the provided resume and job description.
Calculate a compatibility score from 0 to 100.
Provide the score and a brief explanation of key matching elements and significant missing elements.
Return your feedback as a JSON object:
{
  "matchScore": 85,
  "feedback": "The resume shows strong alignment in X and Y skills. However, experience in Z mentioned in the job description is not prominent.",
  "matchingElements": ["Skill A", "Experience B"],
  "missingElements": ["Skill C", "Tool D"]
}"""

ATS_SCORE_INSTRUCTION = """You are an Applicant Tracking System (ATS) compatibility auditor.
Analyze the provided resume text as a typical ATS parser would, independent of any specific job posting.
Score each of these parameters from 0 to 100 and give it a short status ("Strong Match", "Partial Match" or "Needs Improvement"):
- Keyword Optimization (industry and role keywords, skills density)
- Formatting & Structure (standard headings, no tables/columns/graphics, consistent dates)
- Section Completeness (contact, summary, experience, education, skills)
- Action Verbs & Impact (strong verbs, quantified achievements)
- Contact Information (name, email, phone, links parse cleanly)
- Readability & Length (concise bullets, sensible length, no jargon overload)
Then compute an overall ATS compatibility score from 0 to 100.
For every parameter explain how it was evaluated (markdown allowed) and give one actionable recommendation.
Return ONLY a JSON object:
{
  "overallScore": 78,
  "feedback": "Summary of the resume's ATS readiness.",
  "parameterBreakdown": [
    {
      "parameterName": "Keyword Optimization",
      "score": 70,
      "status": "Partial Match",
      "feedback": "How this parameter was evaluated.",
      "recommendation": "What to change."
    }
  ],
  "suggestions": ["Use a standard font and avoid tables/columns.", "Include a clear skills section."]
}"""

RESUME_SUGGESTIONS_INSTRUCTION = """You are an AI resume improvement assistant.
Analyze the provided resume text.
Provide 3-5 actionable suggestions to improve its content, keywords, and formatting for general job applications.
Focus on clarity, impact, and modern resume best practices.
Return your feedback as a JSON object:
{
  "feedback": "Here are some personalized suggestions to enhance your resume:",
  "suggestions": [
    "Consider adding a brief professional summary at the top.",
    "Quantify your achievements in the 'Experience' section with numbers or data.",
    "Ensure consistent formatting for dates and job titles."
  ]
}"""


def _mock_interview_instruction(request: AnalysisRequest) -> str:
    role = (request.secondary_text or "").strip()
    return f"""You are an AI mock interview question generator.
Based on the provided job role or industry, generate 5 relevant interview questions.
These can include behavioral, technical (if applicable for the role), or situational questions.
Return the questions as a JSON object:
{{
  "questions": [
    "Tell me about a time you faced a challenge and how you overcame it.",
    "Describe your experience with [specific technology/skill relevant to the role]."
  ],
  "feedback": "Here are some questions tailored for a {role} role."
}}"""


TASKS: Dict[AnalysisTask, TaskDefinition] = {
    AnalysisTask.RESUME_CRITIQUE: TaskDefinition(
        task=AnalysisTask.RESUME_CRITIQUE,
        instruction=lambda r: RESUME_CRITIQUE_INSTRUCTION,
        build_prompt=lambda r: r.primary_text,
        temperature=0.5,
        error_prefix="An error occurred while analyzing the resume",
        normalize=normalize.normalize_resume_critique,
        description="Upload your resume (PDF/TXT) and get AI-powered feedback on structure, keywords, and common errors.",
    ),
    AnalysisTask.PERCENTAGE_MATCH: TaskDefinition(
        task=AnalysisTask.PERCENTAGE_MATCH,
        instruction=lambda r: PERCENTAGE_MATCH_INSTRUCTION,
        build_prompt=lambda r: (
            f"{_fenced('Resume', r.primary_text)}\n\n"
            f"{_fenced('Job Description', r.secondary_text or '')}\n\n"
            "Please provide the percentage match analysis."
        ),
        temperature=0.3,
        error_prefix="Error calculating match",
        normalize=normalize.normalize_percentage_match,
        description="Upload your resume (PDF/TXT) and paste a job description to see a compatibility score.",
    ),
    AnalysisTask.ATS_SCORE: TaskDefinition(
        task=AnalysisTask.ATS_SCORE,
        instruction=lambda r: ATS_SCORE_INSTRUCTION,
        build_prompt=lambda r: (
            f"{_fenced('Resume for ATS Score Calculation', r.primary_text)}\n\n"
            "Please provide the overall ATS score, the parameter breakdown and suggestions."
        ),
        temperature=0.4,
        error_prefix="Error estimating ATS score",
        normalize=normalize.normalize_ats_score,
        description=(
            "Upload your resume to get a general ATS compatibility score (0-100), a breakdown by key parameters, "
            "and actionable improvement suggestions based on overall resume quality and ATS best practices."
        ),
    ),
    AnalysisTask.MOCK_INTERVIEW_QUESTIONS: TaskDefinition(
        task=AnalysisTask.MOCK_INTERVIEW_QUESTIONS,
        instruction=_mock_interview_instruction,
        build_prompt=lambda r: f"Job Role/Industry: {(r.secondary_text or '').strip()}\n\nPlease generate 5 interview questions.",
        temperature=0.6,
        error_prefix="Error generating questions",
        normalize=normalize.normalize_mock_interview_questions,
        description="Generate interview questions tailored to specific job roles or industries for practice.",
    ),
    AnalysisTask.RESUME_SUGGESTIONS: TaskDefinition(
        task=AnalysisTask.RESUME_SUGGESTIONS,
        instruction=lambda r: RESUME_SUGGESTIONS_INSTRUCTION,
        build_prompt=lambda r: (
            f"{_fenced('Resume for Improvement Suggestions', r.primary_text)}\n\n"
            "Please provide improvement suggestions."
        ),
        temperature=0.5,
        error_prefix="Error getting resume suggestions",
        normalize=normalize.normalize_resume_suggestions,
        description="Personalised improvement suggestions for your primary resume.",
    ),
}

# Tools offered on the services page; resume suggestions live on the profile dashboard.
SERVICE_TASKS = (
    AnalysisTask.RESUME_CRITIQUE,
    AnalysisTask.PERCENTAGE_MATCH,
    AnalysisTask.ATS_SCORE,
    AnalysisTask.MOCK_INTERVIEW_QUESTIONS,
)
