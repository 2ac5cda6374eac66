"""API route handlers."""

from .recommendations import router as recommendations_router
