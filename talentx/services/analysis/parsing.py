# talentx/services/analysis/parsing.py
"""
Turn a raw model reply into a tagged result.

The model is asked for JSON but is free to wrap it in a markdown fence or to
answer in prose. parse_model_reply never raises: it returns ParsedReply with
the decoded object, or ReplyParseError carrying the untouched reply text.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Union

logger = logging.getLogger(__name__)

# ```json\n{...}\n```  or  ```\n{...}\n```
_FENCE_RE = re.compile(r"^```(\w*)?\s*\n?(.*?)\n?\s*```$", re.DOTALL)


@dataclass(frozen=True)
class ParsedReply:
    fields: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ReplyParseError:
    raw_text: str
    reason: str = "Failed to parse JSON"


ReplyParseResult = Union[ParsedReply, ReplyParseError]


def _reject_constant(token: str):
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"Non-standard JSON constant: {token}")


def strip_code_fence(text: str) -> str:
    stripped = text.strip()
    match = _FENCE_RE.match(stripped)
    if match and match.group(2):
        return match.group(2).strip()
    return stripped


def parse_model_reply(raw_text: str) -> ReplyParseResult:
    raw_text = raw_text or ""
    candidate = strip_code_fence(raw_text)
    try:
        data = json.loads(candidate, parse_constant=_reject_constant)
    except (json.JSONDecodeError, ValueError) as exc:
        logger.warning("Failed to parse JSON from model reply: %s", exc)
        logger.debug("Original reply text: %s", raw_text)
        return ReplyParseError(raw_text=raw_text)
    if not isinstance(data, dict):
        logger.warning("Model reply is JSON but not an object (%s)", type(data).__name__)
        return ReplyParseError(raw_text=raw_text, reason="Expected a JSON object")
    return ParsedReply(fields=data)
