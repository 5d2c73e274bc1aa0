# talentx/services/llm_adapters/gemini_adapter.py
"""
Async adapter for the Gemini generateContent REST endpoint.

Settings:
- GEMINI_API_KEY: required; without it is_configured() is False and the
  pipeline never calls generate()
- GEMINI_MODEL / GEMINI_API_BASE: model id and API root
- LLM_TIMEOUT_SEC: optional request timeout (None = wait indefinitely)

Failures are raised to the caller as-is; there is no retry here.
"""

from typing import Any, Dict, Optional

import httpx

from talentx.core.config import settings


class GeminiResponseError(RuntimeError):
    pass


def is_configured() -> bool:
    return bool(settings.GEMINI_API_KEY and settings.GEMINI_API_KEY.strip())


def _endpoint(model: str) -> str:
    base = str(settings.GEMINI_API_BASE).rstrip("/")
    return f"{base}/models/{model}:generateContent"


def _make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.LLM_TIMEOUT_SEC)


def build_body(instruction: str, prompt: str, temperature: float) -> Dict[str, Any]:
    return {
        "systemInstruction": {"parts": [{"text": instruction}]},
        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
        "generationConfig": {
            "responseMimeType": "application/json",
            "temperature": temperature,
        },
    }


def reply_text(data: Dict[str, Any]) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        feedback = data.get("promptFeedback") or {}
        reason = feedback.get("blockReason")
        if reason:
            raise GeminiResponseError(f"Gemini returned no candidates (blocked: {reason})")
        raise GeminiResponseError("Gemini returned no candidates")
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts if isinstance(p, dict))


async def generate(instruction: str, prompt: str, temperature: float, task: Optional[str] = None) -> str:
    model = settings.GEMINI_MODEL
    headers = {
        "Content-Type": "application/json",
        "x-goog-api-key": settings.GEMINI_API_KEY or "",
    }
    async with _make_client() as client:
        resp = await client.post(_endpoint(model), json=build_body(instruction, prompt, temperature), headers=headers)
        resp.raise_for_status()
        return reply_text(resp.json())
