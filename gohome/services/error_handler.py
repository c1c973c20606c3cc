"""
Error handling service for consistent error responses and logging.
API exceptions keep the flat bodies clients rely on; validation failures get structured details.
"""

from datetime import datetime, timezone
from typing import Dict, Any, Optional, List
from fastapi import Request, HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pymongo.errors import ConnectionFailure, PyMongoError, ServerSelectionTimeoutError
from gohome.utils.exceptions import APIException
import logging
import uuid

logger = logging.getLogger(__name__)


class ErrorHandlerService:
    """
    Service for handling and formatting errors consistently across the application.
    Every handler logs with a short request id so responses can be traced in the logs.
    """

    @staticmethod
    def format_error_response(
        error_code: str,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
        request_id: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Format a structured error body.

        Args:
            error_code: Error code identifier
            message: Human-readable error message
            details: Optional list of detailed error information
            request_id: Optional request identifier for tracking

        Returns:
            Formatted error response dictionary
        """
        response = {
            "error": {
                "code": error_code,
                "message": message,
                "timestamp": ErrorHandlerService._get_current_timestamp(),
            }
        }

        if details:
            response["error"]["details"] = details

        if request_id:
            response["error"]["request_id"] = request_id

        return response

    @staticmethod
    def handle_api_exception(
        exception: APIException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle custom API exceptions using the body shape the exception defines.
        """
        request_id = ErrorHandlerService._generate_request_id()

        logger.warning(
            f"API Exception [{request_id}]: {exception.error_code} - {exception.detail}",
            extra={
                "error_code": exception.error_code,
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        return JSONResponse(
            status_code=exception.status_code,
            content=exception.to_content(),
            headers=exception.headers
        )

    @staticmethod
    def handle_validation_error(
        exception: Any,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle request validation errors with detailed field information.

        Args:
            exception: FastAPI RequestValidationError or Pydantic ValidationError
            request: Optional FastAPI request object

        Returns:
            422 JSON response with validation error details
        """
        request_id = ErrorHandlerService._generate_request_id()

        validation_details = []
        for error in exception.errors():
            field_path = " -> ".join(str(loc) for loc in error["loc"])
            validation_details.append({
                "field": field_path,
                "message": error["msg"],
                "type": error["type"],
                "input": error.get("input")
            })

        logger.warning(
            f"Validation Error [{request_id}]: {len(validation_details)} field errors",
            extra={
                "error_count": len(validation_details),
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        error_response = ErrorHandlerService.format_error_response(
            error_code="VALIDATION_ERROR",
            message="Request validation failed",
            details=jsonable_encoder(validation_details),
            request_id=request_id
        )

        return JSONResponse(
            status_code=422,
            content=error_response
        )

    @staticmethod
    def handle_database_error(
        exception: PyMongoError,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """
        Handle document store errors.
        Unreachable servers map to 503, everything else to 500.
        """
        request_id = ErrorHandlerService._generate_request_id()

        if isinstance(exception, (ConnectionFailure, ServerSelectionTimeoutError)):
            error_code = "DATABASE_UNAVAILABLE"
            message = "Database unavailable"
            status_code = 503
        else:
            error_code = "DATABASE_ERROR"
            message = "Database operation failed"
            status_code = 500

        logger.error(
            f"Database Error [{request_id}]: {error_code} - {str(exception)}",
            extra={
                "error_code": error_code,
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__
            },
            exc_info=True
        )

        return JSONResponse(
            status_code=status_code,
            content={"message": message}
        )

    @staticmethod
    def handle_http_exception(
        exception: HTTPException,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle plain HTTP exceptions such as 404 and 405 from routing."""
        request_id = ErrorHandlerService._generate_request_id()

        logger.warning(
            f"HTTP Exception [{request_id}]: {exception.status_code} - {exception.detail}",
            extra={
                "status_code": exception.status_code,
                "request_id": request_id,
                "path": request.url.path if request else None
            }
        )

        return JSONResponse(
            status_code=exception.status_code,
            content={"message": exception.detail},
            headers=exception.headers
        )

    @staticmethod
    def handle_unexpected_error(
        exception: Exception,
        request: Optional[Request] = None
    ) -> JSONResponse:
        """Handle unexpected errors without exposing internals."""
        request_id = ErrorHandlerService._generate_request_id()

        logger.error(
            f"Unexpected Error [{request_id}]: {type(exception).__name__} - {str(exception)}",
            extra={
                "request_id": request_id,
                "path": request.url.path if request else None,
                "exception_type": type(exception).__name__
            },
            exc_info=exception
        )

        return JSONResponse(
            status_code=500,
            content={"message": "Internal server error"}
        )

    @staticmethod
    def _generate_request_id() -> str:
        """Generate a short request ID for error tracking."""
        return str(uuid.uuid4())[:8]

    @staticmethod
    def _get_current_timestamp() -> str:
        return datetime.now(timezone.utc).isoformat()
