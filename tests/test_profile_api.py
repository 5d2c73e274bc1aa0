# tests/test_profile_api.py
import pytest


@pytest.mark.asyncio
async def test_profile_requires_session(client):
    assert (await client.get("/api/v1/profile")).status_code == 401
    assert (await client.post("/api/v1/profile/ai-suggestions", json={})).status_code == 401


@pytest.mark.asyncio
async def test_profile_dashboard(authed_client):
    r = await authed_client.get("/api/v1/profile")
    assert r.status_code == 200
    body = r.json()
    assert body["user"]["email"] == "jane@example.com"
    assert [res["id"] for res in body["resumes"]] == ["r1", "r2"]
    assert body["resumes"][0]["isPrimary"] is True
    assert body["applicationHistory"][0]["jobTitle"] == "Senior Frontend Engineer"


@pytest.mark.asyncio
async def test_update_info(authed_client):
    r = await authed_client.put("/api/v1/profile/info", json={"name": "Jane Doe"})
    assert r.status_code == 200
    assert r.json()["user"]["name"] == "Jane Doe"
    r = await authed_client.put("/api/v1/profile/info", json={"email": "nope"})
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_resume_lifecycle(authed_client):
    files = {"file": ("cv.txt", b"Jane Doe\nData Engineer", "text/plain")}
    r = await authed_client.post("/api/v1/profile/resumes", files=files)
    assert r.status_code == 201
    new_id = r.json()["id"]
    assert r.json()["isPrimary"] is False

    r = await authed_client.post(f"/api/v1/profile/resumes/{new_id}/primary")
    assert r.json()["isPrimary"] is True

    r = await authed_client.get(f"/api/v1/profile/resumes/{new_id}/preview")
    assert r.json() == {"id": new_id, "preview": "Jane Doe\nData Engineer"}

    assert (await authed_client.delete(f"/api/v1/profile/resumes/{new_id}")).status_code == 204
    resumes = (await authed_client.get("/api/v1/profile")).json()["resumes"]
    assert [res["id"] for res in resumes if res["isPrimary"]] == ["r1"]

    assert (await authed_client.delete(f"/api/v1/profile/resumes/{new_id}")).status_code == 404
    assert (await authed_client.get("/api/v1/profile/resumes/missing/preview")).status_code == 404


@pytest.mark.asyncio
async def test_resume_upload_rejects_unsupported_type(authed_client):
    files = {"file": ("cv.docx", b"PK\x03\x04", "application/vnd.openxmlformats-officedocument.wordprocessingml.document")}
    r = await authed_client.post("/api/v1/profile/resumes", files=files)
    assert r.status_code == 415


@pytest.mark.asyncio
async def test_coding_profiles(authed_client):
    r = await authed_client.post("/api/v1/profile/coding-profiles", json={"platform": "CodeChef", "username": "jd"})
    assert r.status_code == 201
    assert r.json()["url"] == "https://example.com/codechef/jd"
    r = await authed_client.post("/api/v1/profile/coding-profiles", json={"platform": "CodeChef", "username": " "})
    assert r.status_code == 400
    r = await authed_client.post("/api/v1/profile/coding-profiles", json={"platform": "Myspace", "username": "jd"})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_ai_suggestions_use_primary_resume(authed_client):
    r = await authed_client.post("/api/v1/profile/ai-suggestions", json={})
    assert r.status_code == 200
    body = r.json()
    assert body["feedback"] == "Here are some personalized suggestions to enhance your resume:"
    assert len(body["suggestions"]) == 3


@pytest.mark.asyncio
async def test_ai_suggestions_without_text(authed_client):
    for rid in ("r1", "r2"):
        await authed_client.delete(f"/api/v1/profile/resumes/{rid}")
    r = await authed_client.post("/api/v1/profile/ai-suggestions", json={"resumeText": "  "})
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_profile_edits_stay_with_their_account(client):
    creds = {"password": "secret123"}
    await client.post("/auth/login", json={"email": "alice@example.com", **creds})
    r = await client.put("/api/v1/profile/info", json={"name": "Alice", "email": "alice.personal@example.com"})
    assert r.json()["user"]["name"] == "Alice"
    await client.post("/api/v1/profile/coding-profiles", json={"platform": "GitHub", "username": "alice-gh"})
    await client.post("/auth/logout")

    await client.post("/auth/login", json={"email": "bob@example.com", **creds})
    body = (await client.get("/api/v1/profile")).json()
    assert body["user"]["email"] == "bob@example.com"
    assert body["user"].get("name") is None
    assert "alice-gh" not in [p["username"] for p in body["codingProfiles"]]
    await client.post("/auth/logout")

    await client.post("/auth/login", json={"email": "alice@example.com", **creds})
    body = (await client.get("/api/v1/profile")).json()
    assert body["user"] == {"id": "mockId", "email": "alice.personal@example.com", "name": "Alice"}
