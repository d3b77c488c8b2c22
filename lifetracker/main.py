"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from lifetracker import __version__
from lifetracker.api import activity, auth, nutrition
from lifetracker.config import get_settings
from lifetracker.errors import register_exception_handlers

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting LifeTracker API ({settings.environment})")
    yield
    logger.info("LifeTracker API stopped")


app = FastAPI(
    title="LifeTracker API",
    description="Personal tracking of nutrition and activity",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log one line per request."""
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


# Register routers
app.include_router(auth.router)
app.include_router(nutrition.router)
app.include_router(activity.router)


@app.get("/")
async def ping():
    """Liveness ping."""
    return {"ping": "pong"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run("lifetracker.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
