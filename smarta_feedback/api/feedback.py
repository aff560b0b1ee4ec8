import logging

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from ..core.errors import InvalidField, MalformedInput, PersistenceFailure, Unauthorized
from ..schemas.feedback import AuthenticatedCaller, ErrorResponse
from ..services.store import FeedbackStore
from ..services.validation import FeedbackValidator
from .dependencies import get_caller, get_feedback_store, get_feedback_validator, get_request_body
from .routing import ROUTED_METHODS, AnyMethodRoute

logger = logging.getLogger(__name__)

router = APIRouter(route_class=AnyMethodRoute)


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status=status_code, message=message).model_dump(),
    )


@router.api_route(
    "/feedback",
    methods=ROUTED_METHODS,
    status_code=status.HTTP_200_OK,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        405: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def save_feedback(
    request: Request,
    caller: AuthenticatedCaller = Depends(get_caller),
    body: bytes = Depends(get_request_body),
    validator: FeedbackValidator = Depends(get_feedback_validator),
    store: FeedbackStore = Depends(get_feedback_store),
):
    """
    Save a feedback using the request body and the identity headers
    forwarded by the API gateway.
    """
    if request.method != "POST":
        return error_response(status.HTTP_405_METHOD_NOT_ALLOWED, "use POST instead")

    try:
        record = validator.validate(caller, body)
    except (Unauthorized, MalformedInput, InvalidField) as e:
        return error_response(e.status_code, e.message)

    try:
        store.save_feedback(record)
    except PersistenceFailure as e:
        logger.error(e.message, extra={"error_code": e.error_code, "details": e.details})
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "failed to save feedback")

    return Response(status_code=status.HTTP_200_OK)
