import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from dotenv import load_dotenv
from .api.steam import router as steam_router
from .core.config import get_settings
from .services.providers.steam_user import SteamUserProvider

load_dotenv()

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # --- Startup logic ---
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)
    # httpx logs full request URLs at INFO, which include the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    # Provider holds configuration only; the HTTP client is opened per request
    app.state.steam_user = SteamUserProvider.from_settings(settings)
    if settings.PROXY_SERVER:
        logger.info("Steam requests routed through configured proxy")
    if not settings.STEAM_API_KEY:
        logger.warning("STEAM_API_KEY is not set; player lookups will return null")

    yield  # main app runs here

    # --- Cleanup on shutdown ---
    app.state.steam_user = None

def create_app() -> FastAPI:
    app = FastAPI(title=get_settings().APP_NAME, lifespan=lifespan)

    # Routers
    app.include_router(steam_router, prefix="/steam", tags=["steam"])

    @app.get("/health")
    async def health():
        provider = getattr(app.state, "steam_user", None)
        configured = await provider.check_health() if provider else False
        return {"status": "ok", "service": "steam-proxy", "steam_api_key_configured": configured}

    return app
app = create_app()
