"""FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend.config import settings
from backend.database import create_db_and_tables
from backend.services.errors import ServiceError
from backend.utils.logging import setup_logging
from backend.api import auth, players, best_albums, yancey_music, sms, bandwagon, uploads, system

access_logger = logging.getLogger("backend.access")

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-XSS-Protection": "0",
    "Referrer-Policy": "no-referrer",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    setup_logging()
    create_db_and_tables()
    yield


app = FastAPI(
    title="Blog Backend",
    description="Blog backend: auth with TOTP two-factor, music player, albums, SMS, uploads",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def access_log_and_headers(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    access_logger.info(
        f"{request.method} {request.url.path} {response.status_code} {elapsed_ms:.1f}ms"
    )
    return response


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


# Mount routers
app.include_router(auth.router)
app.include_router(players.router)
app.include_router(best_albums.router)
app.include_router(yancey_music.router)
app.include_router(sms.router)
app.include_router(bandwagon.router)
app.include_router(uploads.router)
app.include_router(system.router)
