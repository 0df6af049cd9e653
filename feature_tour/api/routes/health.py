"""Health routes: full report, readiness and liveness."""

from typing import Any

from fastapi import APIRouter, Depends, Request, Response, status

from feature_tour.api.dependencies import AppState, get_app_state
from feature_tour.core.health import ServiceStatus
from feature_tour.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    request: Request,
    response: Response,
    app_state: AppState = Depends(get_app_state),
) -> dict[str, Any]:
    """Catalog and paginator status. 503 unless every component is healthy."""
    report = app_state.health_report(version=request.app.version)

    if report.status is not ServiceStatus.HEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning(
            "health_check_failed",
            status=report.status.value,
            checks={check.name: check.status.value for check in report.checks},
        )

    return report.to_dict()


@router.get("/ready")
async def readiness_check(
    response: Response,
    app_state: AppState = Depends(get_app_state),
) -> dict[str, Any]:
    """Ready once the paginator exists, even over an empty catalog."""
    if not app_state.is_initialized:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {"ready": False}

    paginator = app_state.paginator
    return {
        "ready": True,
        "current_index": paginator.state.current_index,
        "total_topics": paginator.state.total_items,
        "subscribers": paginator.subscriber_count,
    }


@router.get("/live")
async def liveness_check() -> dict[str, bool]:
    return {"alive": True}
