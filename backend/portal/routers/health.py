"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, Request, status

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(request: Request):
    """
    Readiness check that verifies the credential and session stores.
    Returns 200 with per-dependency status.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
        "redis": "unknown",
    }

    # Check MongoDB
    try:
        await request.app.state.user_store.ping()
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    # Check Redis
    try:
        await request.app.state.session_store.ping()
        checks["redis"] = "healthy"
    except Exception as e:
        checks["redis"] = f"unhealthy: {str(e)}"

    # Overall status
    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
