"""Shipline FastAPI application.

Web server for the logistics domain. Commands are processed synchronously
inside the request, each wrapped in the domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
# PROTEAN_ENV selects the config overlay ("production" switches to PostgreSQL).
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers

from logistics.domain import logistics

logistics.init()

# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Shipline API",
    description="Delivery logistics: orders, courier assignments and delivery events",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the logistics domain context for each request."""
    with logistics.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers and error mapping
# ---------------------------------------------------------------------------
from logistics.api import (  # noqa: E402
    account_router,
    assignment_router,
    order_router,
    register_conflict_handler,
)

app.include_router(account_router)
app.include_router(order_router)
app.include_router(assignment_router)

register_exception_handlers(app)
register_conflict_handler(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": logistics.name})
