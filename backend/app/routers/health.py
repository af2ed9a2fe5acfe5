"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Request, status

from app.database.databases.institute_db import Resources

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """Returns 200 if the API process is up."""
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(request: Request):
    """
    Readiness check against the collection registry built at startup.

    MongoDB is pinged through the database the registered collections live
    in, so the check covers the same connection requests are served from.
    Returns 200 with a degraded status when either check fails.
    """
    checks = {
        "api": "healthy",
        "registry": "unknown",
        "mongodb": "unknown",
    }

    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        checks["registry"] = "unhealthy: not initialized"
        checks["mongodb"] = "unhealthy: no registered collections"
    else:
        checks["registry"] = "healthy"
        try:
            database = registry.resolve(Resources.INSTITUTES).database
            await database.command("ping")
            checks["mongodb"] = "healthy"
        except Exception as e:
            checks["mongodb"] = f"unhealthy: {e}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
        "collections": registry.names() if registry is not None else [],
    }
