"""
==============================================================================
Main API Router
==============================================================================

Combines the catalog and health routes. Catalog paths are served from
the application root.

==============================================================================
"""

from fastapi import APIRouter

from marketplace.api import health, products


class MainAPIRouter:
    """Main API router combining all route modules."""

    def __init__(self):
        self._router = APIRouter()
        self._include_routers()

    def _include_routers(self) -> None:
        self._router.include_router(health.router)
        self._router.include_router(products.router)

    @property
    def router(self):
        """Get the FastAPI router instance."""
        return self._router


# Create main API router instance
api_router = MainAPIRouter().router
