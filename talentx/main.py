# talentx/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from talentx.api.v1.analysis import router as analysis_router
from talentx.api.v1.auth import router as auth_router
from talentx.api.v1.files import router as files_router
from talentx.api.v1.listings import router as listings_router
from talentx.api.v1.profile import router as profile_router
from talentx.core.config import settings
from talentx.services.analysis.requests import AnalysisRequestTracker
from talentx.services.kv_store import build_store
from talentx.services.profile import ProfileDirectory
from talentx.services.session import SessionContext

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = build_store()
    app.state.session = await SessionContext(store).initialize()
    app.state.profiles = ProfileDirectory()
    app.state.tracker = AnalysisRequestTracker()
    logger.info("TalentX API started (env=%s, adapter=%s, store=%s)", settings.APP_ENV, settings.LLM_ADAPTER, settings.SESSION_STORE)
    yield
    app.state.tracker.advance()
    close = getattr(store, "close", None)
    if close is not None:
        await close()


def create_app() -> FastAPI:
    app = FastAPI(title="TalentX API", lifespan=lifespan)

    app.include_router(listings_router, prefix="/api/v1")
    app.include_router(analysis_router, prefix="/api/v1")
    app.include_router(files_router, prefix="/api/v1")
    app.include_router(profile_router, prefix="/api/v1")
    # auth lives at the root /auth paths
    app.include_router(auth_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
