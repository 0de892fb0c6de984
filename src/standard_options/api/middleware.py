"""
FastAPI middleware for error handling and request processing.

Converts domain exceptions into appropriate HTTP responses.
"""

import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

from ..utils.exceptions import (
    InvalidArgumentError,
    OutOfRangeError,
    StandardOptionsError,
)
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


async def error_handler_middleware(request: Request, call_next):
    """
    Catch domain exceptions and convert them to HTTP error responses.

    Args:
        request: FastAPI request
        call_next: Next middleware/handler in chain

    Returns:
        Response or JSONResponse with error details

    Exception Mapping:
        - InvalidArgumentError → 400 Bad Request
        - OutOfRangeError → 404 Not Found
        - Other StandardOptionsError → 500 Internal Server Error
    """
    try:
        response = await call_next(request)
        return response
    except InvalidArgumentError as e:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ErrorResponse(error=e.message, code=e.code).model_dump(),
        )
    except OutOfRangeError as e:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=ErrorResponse(error=e.message, code=e.code).model_dump(),
        )
    except StandardOptionsError as e:
        # Catch-all for other custom exceptions
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=e.message, code=e.code).model_dump(),
        )
    except Exception:
        # Unexpected errors - don't expose internals
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="An unexpected error occurred",
                code="INTERNAL_SERVER_ERROR",
            ).model_dump(),
        )
