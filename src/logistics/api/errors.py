"""HTTP mapping for domain conflicts.

Protean's FastAPI integration covers validation failures and missing
aggregates. Operations that are well-formed but clash with current state
(a second active assignment, delivery by the wrong courier) surface as
``InvalidOperationError`` and are reported as 409 Conflict.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from protean.exceptions import InvalidOperationError

from logistics.utils.logging import get_logger

logger = get_logger(__name__)


def register_conflict_handler(app: FastAPI) -> None:
    """Register the 409 handler. Call after ``register_exception_handlers``."""

    @app.exception_handler(InvalidOperationError)
    async def _invalid_operation(request: Request, exc: InvalidOperationError):
        logger.warning("Request conflicts with current state", path=request.url.path, error=str(exc))
        return JSONResponse(status_code=409, content={"error": str(exc)})
