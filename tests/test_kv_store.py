# tests/test_kv_store.py
import json
from unittest.mock import AsyncMock

import pytest

from talentx.services import kv_store
from talentx.services.kv_store import JsonFileStore, MemoryStore, RedisStore, build_store


@pytest.mark.asyncio
async def test_json_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "nested" / "storage.json"
    store = JsonFileStore(str(path))
    assert await store.get("authToken") is None

    await store.set("authToken", "tok")
    await store.set("authUserEmail", "a@b.com")
    assert json.loads(path.read_text(encoding="utf-8")) == {"authToken": "tok", "authUserEmail": "a@b.com"}

    other = JsonFileStore(str(path))
    assert await other.get("authUserEmail") == "a@b.com"
    await other.delete("authToken")
    assert await store.get("authToken") is None


@pytest.mark.asyncio
async def test_json_file_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(str(path))
    assert await store.get("authToken") is None
    await store.set("authToken", "tok")
    assert await store.get("authToken") == "tok"


@pytest.mark.asyncio
async def test_memory_store_delete_missing_key_is_noop():
    store = MemoryStore({"k": "v"})
    await store.delete("missing")
    assert await store.get("k") == "v"


@pytest.mark.asyncio
async def test_redis_store_prefixes_keys(monkeypatch):
    fake = AsyncMock()
    fake.get.return_value = "tok"
    monkeypatch.setattr(kv_store.aioredis, "from_url", lambda url, decode_responses=True: fake)

    store = RedisStore("redis://example:6379/0", prefix="test:")
    await store.set("authToken", "tok")
    assert await store.get("authToken") == "tok"
    await store.delete("authToken")
    await store.close()

    fake.set.assert_awaited_once_with("test:authToken", "tok")
    fake.get.assert_awaited_once_with("test:authToken")
    fake.delete.assert_awaited_once_with("test:authToken")
    fake.aclose.assert_awaited_once()


def test_build_store_kinds(test_settings, monkeypatch, tmp_path):
    monkeypatch.setattr(test_settings, "SESSION_STORE_PATH", str(tmp_path / "s.json"))
    assert isinstance(build_store("memory"), MemoryStore)
    assert isinstance(build_store("file"), JsonFileStore)
    assert isinstance(build_store("redis"), RedisStore)
    assert isinstance(build_store(), MemoryStore)
    with pytest.raises(ValueError):
        build_store("sqlite")
