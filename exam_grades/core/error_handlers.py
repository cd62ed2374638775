import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from exam_grades.core.errors import (
    AssignmentNotFound,
    GradingNotAllowed,
    InvalidInput,
    InvalidStatusTransition,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = {
    InvalidInput: 422,
    AssignmentNotFound: 404,
    GradingNotAllowed: 409,
    InvalidStatusTransition: 409,
}


def register_error_handlers(app: FastAPI) -> None:
    for exc_class, status_code in _STATUS_BY_ERROR.items():
        app.add_exception_handler(exc_class, _handler_for(status_code))


def _handler_for(status_code: int):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handler
