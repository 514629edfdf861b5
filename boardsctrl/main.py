"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from boardsctrl.api import router as api_router
from boardsctrl.core.config import Settings, settings


def cors_origins(app_settings: Settings) -> list[str]:
    """Browsers may call from any origin in dev; other environments allow none."""
    return ["*"] if app_settings.APP_ENV == "dev" else []


app = FastAPI(
    title="BoardsCTRL API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(settings),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.API_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "BoardsCTRL API"}
