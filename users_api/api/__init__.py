"""
API layer for the Users API.

Exposes the /api/users HTTP endpoints and translates domain errors into
HTTP responses.
"""
from .user_controller import router as user_router
from .error_handlers import register_exception_handlers

__all__ = ["user_router", "register_exception_handlers"]
