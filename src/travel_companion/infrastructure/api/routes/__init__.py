"""API Routes for Travel Companion."""

from .groups_router import router as groups_router
from .messages_router import router as messages_router

__all__ = [
    "groups_router",
    "messages_router",
]
