"""Tips domain API package."""

from tips.api.routes import tip_router

__all__ = ["tip_router"]
