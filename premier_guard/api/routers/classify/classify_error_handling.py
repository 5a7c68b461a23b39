"""
Classification error handling utilities.

Provides a decorator that turns pipeline exceptions into the endpoint's
`{"error": ...}` responses.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import status
from fastapi.responses import JSONResponse

from premier_guard.core.exceptions import RequestValidationError
from premier_guard.models.common import ErrorResponse
from premier_guard.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Something went wrong!"

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def error_response(message: str, status_code: int) -> JSONResponse:
    """Build an error body in the endpoint's wire format."""
    return JSONResponse(
        ErrorResponse(error=message).model_dump(),
        status_code=status_code,
    )


def handle_classification_errors(func: F) -> F:
    """
    Decorator mapping classification failures to HTTP responses.

    This centralizes:
    - Rejections the caller can fix (406/400/413 with a specific message)
    - Everything else as an opaque 500, logged with the full cause
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except RequestValidationError as e:
            logger.warning(
                "Classification request rejected",
                extra={"status_code": e.status_code, "error": str(e)},
            )
            return error_response(e.message, e.status_code)

        except Exception as e:
            log_exception_with_context(
                logger,
                "Unexpected failure during classification",
                e,
                details=getattr(e, "details", None),
            )
            return error_response(
                INTERNAL_ERROR_MESSAGE,
                status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

    return wrapper  # type: ignore
