# talentx/services/kv_store.py
"""
Local persistent key-value storage for string values.

Backends:
- JsonFileStore: one JSON object on disk (default, survives restarts)
- RedisStore: redis.asyncio, for deployments running several workers
- MemoryStore: process-local dict, used by tests

All three expose the same async get / set / delete interface.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Dict, Optional

import aiofiles
import redis.asyncio as aioredis

from talentx.core.config import settings

logger = logging.getLogger(__name__)


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    def __init__(self, path: str):
        self._path = Path(path)
        self._lock = asyncio.Lock()

    async def _load(self) -> Dict[str, str]:
        if not self._path.exists():
            return {}
        async with aiofiles.open(self._path, "r", encoding="utf-8") as fh:
            raw = await fh.read()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Ignoring corrupt key-value file %s", self._path)
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)} if isinstance(data, dict) else {}

    async def _dump(self, data: Dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        async with aiofiles.open(self._path, "w", encoding="utf-8") as fh:
            await fh.write(json.dumps(data, ensure_ascii=False, indent=2))

    async def get(self, key: str) -> Optional[str]:
        data = await self._load()
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        async with self._lock:
            data = await self._load()
            data[key] = value
            await self._dump(data)

    async def delete(self, key: str) -> None:
        async with self._lock:
            data = await self._load()
            if key in data:
                del data[key]
                await self._dump(data)


class RedisStore:
    def __init__(self, url: Optional[str] = None, prefix: str = "talentx:storage:"):
        self._url = url or settings.REDIS_URL
        self._prefix = prefix
        self._client = None

    async def _get_client(self):
        if self._client is None:
            self._client = aioredis.from_url(self._url, decode_responses=True)
        return self._client

    async def get(self, key: str) -> Optional[str]:
        client = await self._get_client()
        return await client.get(self._prefix + key)

    async def set(self, key: str, value: str) -> None:
        client = await self._get_client()
        await client.set(self._prefix + key, value)

    async def delete(self, key: str) -> None:
        client = await self._get_client()
        await client.delete(self._prefix + key)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None


def build_store(kind: Optional[str] = None):
    kind = (kind or settings.SESSION_STORE).lower()
    if kind == "file":
        return JsonFileStore(settings.SESSION_STORE_PATH)
    if kind == "redis":
        return RedisStore(settings.REDIS_URL)
    if kind == "memory":
        return MemoryStore()
    raise ValueError(f"Unsupported SESSION_STORE={kind!r}")
