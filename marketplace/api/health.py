"""
==============================================================================
Health Check Endpoints
==============================================================================

System health status endpoints for monitoring and orchestration.

==============================================================================
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from marketplace.config import get_settings
from marketplace.db.database import get_db
from marketplace.schemas.common import HealthResponse


router = APIRouter(prefix="/health", tags=["Health"])


class HealthController:
    """Controller for health check operations."""

    def __init__(self, db: Session):
        self._db = db

    def check_database(self) -> str:
        """Check database connectivity."""
        try:
            self._db.execute(text("SELECT 1"))
            return "healthy"
        except SQLAlchemyError:
            return "unhealthy"

    def check_object_store(self) -> str:
        """Report whether an upload bucket is configured."""
        return "configured" if get_settings().object_store_configured else "not_configured"

    def get_health(self) -> HealthResponse:
        """Get full health status."""
        db_status = self.check_database()
        store_status = self.check_object_store()

        overall = "healthy" if db_status == "healthy" and store_status == "configured" else "degraded"

        return HealthResponse(
            status=overall,
            components={
                "api": "healthy",
                "database": db_status,
                "object_store": store_status,
            },
        )


@router.get("", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns API, database and object store status.
    """
    controller = HealthController(db)
    return controller.get_health()


@router.get("/ready")
async def readiness_check():
    """Readiness probe for container orchestration."""
    return {"ready": True}


@router.get("/live")
async def liveness_check():
    """Liveness probe for container orchestration."""
    return {"alive": True}
