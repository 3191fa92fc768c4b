"""FastAPI app: /health, /check, /check/report, /check/batch."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_host, get_log_level, get_port
from .routes import check_router, health_router
from .startup import validate_config

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Component Linter API",
    description="Rule-based organization and style checks for React component files.",
    version="0.1.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(check_router)


@app.on_event("startup")
def _validate_config() -> None:
    """Warn about missing .env and report thresholds at startup."""
    validate_config()


def run() -> None:
    """Serve the app on HOST:PORT."""
    uvicorn.run(app, host=get_host(), port=get_port(), log_level=get_log_level().lower())


if __name__ == "__main__":
    run()
