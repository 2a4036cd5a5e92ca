"""
Health Check Endpoints.

``/health`` pings the database so that a load balancer takes the instance
out of rotation when its database is gone; ``/version`` reports the build.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from funshop.core.logging_config import get_logger
from funshop.server.core import constant
from funshop.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter()


@router.get(
    "/health",
    summary="Health Check",
    responses={503: {"description": "Database unreachable"}},
)
async def health_check(session: SessionDep):
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check failed, database unreachable: {e}")
        return JSONResponse(status_code=503, content={"status": "unavailable", "database": "unreachable"})
    return {"status": "ok", "database": "ok"}


@router.get("/version", summary="Get Version")
async def version():
    return {"name": constant.PROJECT_NAME, "version": constant.VERSION, "schema_version": constant.SCHEMA_VERSION}
