# talentx/services/llm_adapters/mock_adapter.py
"""
Deterministic mock adapter for local development and CI.
Replies are canned JSON per task, varied only by a hash of the prompt so the
same input always yields the same reply.
"""

import asyncio
import hashlib
import json
from typing import Optional


def is_configured() -> bool:
    return True


def _score(prompt: str, low: int = 55, high: int = 95) -> int:
    h = int(hashlib.sha256(prompt.encode("utf-8")).hexdigest()[:8], 16)
    return low + h % (high - low + 1)


async def generate(instruction: str, prompt: str, temperature: float, task: Optional[str] = None) -> str:
    await asyncio.sleep(0)  # keep async signature
    score = _score(prompt)
    if task == "resumeAnalyzer":
        body = {
            "feedback": "**Overall:** a solid draft. Structure is readable; impact statements need numbers.",
            "suggestions": ["Quantify achievements more.", "Use stronger action verbs in the experience section."],
        }
        # the real model sometimes fences its JSON; mimic that here
        return "```json\n" + json.dumps(body) + "\n```"
    if task == "percentageMatch":
        body = {
            "matchScore": score,
            "feedback": "The resume aligns with the core skills of the role; some tooling is not mentioned.",
            "matchingElements": ["Python", "REST APIs"],
            "missingElements": ["Kubernetes"],
        }
    elif task == "atsScoreCalculator":
        body = {
            "overallScore": score,
            "feedback": "The resume parses cleanly; keyword coverage could be broader.",
            "parameterBreakdown": [
                {"parameterName": "Keyword Optimization", "score": max(score - 10, 0), "status": "Partial Match",
                 "feedback": "Common role keywords appear only once.", "recommendation": "Mirror key terms from target postings."},
                {"parameterName": "Formatting & Structure", "score": min(score + 5, 100), "status": "Strong",
                 "feedback": "Standard headings and a single column layout.", "recommendation": "Keep the current layout."},
                {"parameterName": "Section Completeness", "status": "Good",
                 "feedback": "Contact, experience, education and skills are present."},
            ],
            "suggestions": ["Add a dedicated skills section near the top."],
        }
    elif task == "aiMockInterviewQuestions":
        body = {
            "questions": [
                "Tell me about a time you faced a challenge and how you overcame it.",
                "Describe a project you are proud of and your role in it.",
                "How do you prioritise competing deadlines?",
                "What would you improve in the last system you worked on?",
                "Why are you interested in this role?",
            ],
            "feedback": "Here are some practice questions for this role.",
        }
    elif task == "resumeSuggestions":
        body = {
            "feedback": "Here are some personalized suggestions to enhance your resume:",
            "suggestions": [
                "Consider adding a brief professional summary at the top.",
                "Quantify your achievements with numbers or data.",
                "Ensure consistent formatting for dates and job titles.",
            ],
        }
    else:
        body = {"feedback": "Mock reply.", "task": task}
    return json.dumps(body)
