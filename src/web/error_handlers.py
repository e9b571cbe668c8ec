"""Global exception handlers for the Flowdesk API.

Domain errors become structured JSON; anything unhandled becomes a 500 that
names the failing feature but never leaks internals, so one broken feature
does not take the others down with it.
"""

import structlog
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from docstore import DocumentNotFoundError

logger = structlog.get_logger()


class FlowdeskError(Exception):
    """Base error for failures surfaced to API clients."""

    code = "FLOWDESK_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"error": {"code": self.code, "message": self.message}}


def feature_from_path(path: str) -> str:
    """``/api/stash/abc`` -> ``stash``."""
    parts = [p for p in path.split("/") if p]
    if len(parts) >= 2 and parts[0] == "api":
        return parts[1]
    return parts[0] if parts else "root"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(FlowdeskError)
    async def flowdesk_error_handler(request: Request, exc: FlowdeskError):
        logger.warning("api.error", code=exc.code, path=request.url.path, error=exc.message)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(DocumentNotFoundError)
    async def not_found_handler(request: Request, exc: DocumentNotFoundError):
        logger.info("api.not_found", collection=exc.collection, doc_id=exc.doc_id)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": {"code": "NOT_FOUND", "message": "Not found", "id": exc.doc_id}},
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        feature = feature_from_path(request.url.path)
        logger.error(
            "api.unhandled_error", feature=feature, path=request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "feature": feature,
                }
            },
        )
