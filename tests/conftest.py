# tests/conftest.py
import pytest
from httpx import AsyncClient, ASGITransport

from talentx.core.config import settings


@pytest.fixture(autouse=True)
def test_settings(monkeypatch):
    """Memory-backed session, no simulated latency, deterministic mock LLM."""
    monkeypatch.setattr(settings, "SESSION_STORE", "memory")
    monkeypatch.setattr(settings, "LISTING_LATENCY_MS", 0)
    monkeypatch.setattr(settings, "FEATURED_LATENCY_MS", 0)
    monkeypatch.setattr(settings, "LLM_ADAPTER", "mock")
    monkeypatch.setattr(settings, "GEMINI_API_KEY", None)
    return settings


@pytest.fixture
async def app():
    from talentx.main import create_app

    application = create_app()
    async with application.router.lifespan_context(application):
        yield application


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
async def authed_client(client):
    r = await client.post("/auth/login", json={"email": "jane@example.com", "password": "secret123"})
    assert r.status_code == 200
    return client


def _build_pdf(pages):
    """Minimal multi-page PDF with one Helvetica text run per page."""
    page_ids = [4 + 2 * i for i in range(len(pages))]
    kids = " ".join(f"{pid} 0 R" for pid in page_ids)
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(pages)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for pid, text in zip(page_ids, pages):
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {pid + 1} 0 R >>"
            ).encode()
        )
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = b"%PDF-1.4\n"
    offsets = []
    for num, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{num} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for off in offsets:
        out += f"{off:010d} 00000 n \n".encode()
    out += f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\nstartxref\n{xref_at}\n%%EOF\n".encode()
    return out


@pytest.fixture
def make_pdf():
    return _build_pdf
