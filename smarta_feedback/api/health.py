from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..schemas.health import HealthResponse
from ..services.health import HealthService
from .dependencies import get_health_service
from .routing import ROUTED_METHODS, AnyMethodRoute

router = APIRouter(route_class=AnyMethodRoute)


@router.api_route("/health", methods=ROUTED_METHODS, response_model=HealthResponse)
def health(service: HealthService = Depends(get_health_service)):
    """
    Report database connectivity and recent user outage reports.

    Always answers 200; a degraded service shows up as unhealthy statuses
    in the body.
    """
    result = service.check()
    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=result.model_dump(mode="json", exclude_none=True),
    )
