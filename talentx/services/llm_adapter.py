# talentx/services/llm_adapter.py
"""
Pluggable LLM adapter loader.

LLM_ADAPTER selects the back end: "gemini" (default) or "mock"; any other
value is imported as a module path. An adapter module must expose

- def is_configured() -> bool
- async def generate(instruction, prompt, temperature, task=None) -> str

Unlike a retrying client, nothing here falls back to another adapter: a
failing call is reported to the caller, which folds it into the result.
"""

import importlib
from types import ModuleType
from typing import Dict, Optional

from talentx.core.config import settings

_BUILTIN = {
    "gemini": "talentx.services.llm_adapters.gemini_adapter",
    "mock": "talentx.services.llm_adapters.mock_adapter",
}

_loaded: Dict[str, ModuleType] = {}


def _load_adapter(name: str) -> ModuleType:
    mod = importlib.import_module(_BUILTIN.get(name, name))
    for attr in ("is_configured", "generate"):
        if not hasattr(mod, attr):
            raise RuntimeError(f"Adapter {name} does not expose {attr}()")
    return mod


def get_adapter(name: Optional[str] = None) -> ModuleType:
    name = (name or settings.LLM_ADAPTER).strip()
    if name.lower() in _BUILTIN:
        name = name.lower()
    if name not in _loaded:
        _loaded[name] = _load_adapter(name)
    return _loaded[name]
