"""Logistics domain API package."""

from logistics.api.errors import register_conflict_handler
from logistics.api.routes import account_router, assignment_router, order_router

__all__ = ["account_router", "order_router", "assignment_router", "register_conflict_handler"]
