"""FastAPI application entry point."""

import os
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from observability import log_run_summary
from web.error_handlers import register_error_handlers
from web.routes import dashboard, focus, goals, journal, lists, search, stash

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not os.getenv("FLOWDESK_JWT_SECRET"):
        logger.critical("FLOWDESK_JWT_SECRET env var not set")
        raise RuntimeError("FLOWDESK_JWT_SECRET required")
    logger.info("web.startup")
    yield
    log_run_summary()
    logger.info("web.shutdown")


app = FastAPI(
    title="Flowdesk",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS: allow frontend origin
frontend_origin = os.getenv("FRONTEND_ORIGIN", "http://localhost:3000")
app.add_middleware(
    CORSMiddleware,
    allow_origins=[frontend_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Mount routes
app.include_router(dashboard.router)
app.include_router(goals.router)
app.include_router(lists.router)
app.include_router(journal.router)
app.include_router(stash.router)
app.include_router(search.router)
app.include_router(focus.router)


@app.get("/api/health")
async def health():
    return {"status": "ok"}
