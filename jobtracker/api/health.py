"""Operational endpoints: liveness, readiness and Prometheus scraping.

These are mounted at the application root, outside ``settings.api_prefix``.
"""

from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from jobtracker.db import SessionLocal

router = APIRouter(tags=["ops"])

HEALTHY = {"status": "healthy"}


@router.get("/health")
@router.get("/health/live")
async def live() -> dict:
    return HEALTHY


@router.get("/health/ready")
def ready():
    """200 once the database answers ``SELECT 1``; 503 with the error otherwise."""
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        database = {"status": "unhealthy", "error": str(exc)}
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "dependencies": {"database": database}},
        )
    finally:
        db.close()
    return {"status": "healthy", "dependencies": {"database": HEALTHY}}


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
