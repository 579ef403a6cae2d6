"""Directory domain API package."""

from directory.api.routes import artisan_router, member_router

__all__ = ["member_router", "artisan_router"]
