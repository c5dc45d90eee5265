"""
FastAPI application entry point
"""

import time
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .core.exceptions import register_exception_handlers
from .core.logging import setup_logging, get_logger
from .database import init_db
from .routes import auth, users, posts, chat, ratings, favorites, reports, blocks

setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Development convenience: create missing tables on startup
    init_db()
    logger.info(f"{settings.app_name} started")
    yield
    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request in full verbosity, only failed ones otherwise"""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000

    if response.status_code >= 500:
        level = logging.ERROR
    elif settings.log_verbosity == "full":
        level = logging.INFO
    elif response.status_code >= 400:
        level = logging.DEBUG
    else:
        return response

    logger.log(
        level,
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)",
        extra={"event": "request", "status_code": response.status_code},
    )
    return response


register_exception_handlers(app)

prefix = settings.api_prefix
app.include_router(auth.router, prefix=prefix, tags=["Auth"])
app.include_router(users.router, prefix=f"{prefix}/users", tags=["Users"])
app.include_router(posts.router, prefix=f"{prefix}/posts", tags=["Posts"])
app.include_router(chat.router, prefix=prefix, tags=["Messages"])
app.include_router(ratings.router, prefix=f"{prefix}/ratings", tags=["Ratings"])
app.include_router(favorites.router, prefix=f"{prefix}/favorites", tags=["Favorites"])
app.include_router(reports.router, prefix=f"{prefix}/reports", tags=["Reports"])
app.include_router(blocks.router, prefix=f"{prefix}/blocks", tags=["Blocks"])


@app.get("/health")
def health():
    return {"status": "ok"}
