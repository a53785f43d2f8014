"""FastAPI integration: render every failure as an error envelope."""

from __future__ import annotations

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from services.libs.opendata_service_libs.envelope import error
from services.libs.opendata_service_libs.error_handling.error_detail import ErrorCode
from services.libs.opendata_service_libs.error_handling.gateway_error import GatewayError
from services.libs.opendata_service_libs.logging_utils import create_service_logger

logger = create_service_logger("error_handling.fastapi")

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.RESOURCE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.TIMEOUT: status.HTTP_504_GATEWAY_TIMEOUT,
    ErrorCode.CONNECTION_ERROR: status.HTTP_503_SERVICE_UNAVAILABLE,
    ErrorCode.EXTERNAL_SERVICE_ERROR: status.HTTP_502_BAD_GATEWAY,
    ErrorCode.INVALID_RESPONSE: status.HTTP_502_BAD_GATEWAY,
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def _envelope_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error(message).model_dump(mode="json"))


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        # ("query", "minLat") -> "minLat"
        location = ".".join(str(loc) for loc in err["loc"][1:]) or str(err["loc"][0])
        parts.append(f"{location}: {err['msg']}")
    return "Invalid request parameters: " + "; ".join(parts)


def register_error_handlers(app: FastAPI) -> None:
    """Register envelope-producing exception handlers on the application."""

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
        status_code = ERROR_CODE_TO_HTTP_STATUS.get(
            exc.error_detail.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        logger.warning(
            "Request failed with gateway error",
            path=request.url.path,
            http_status=status_code,
            **exc.to_log_context(),
        )
        return _envelope_response(status_code, exc.error_detail.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        message = _format_validation_errors(exc)
        logger.info("Rejected request parameters", path=request.url.path, reason=message)
        return _envelope_response(status.HTTP_422_UNPROCESSABLE_ENTITY, message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            error_type=type(exc).__name__,
            exc_info=exc,
        )
        return _envelope_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)
