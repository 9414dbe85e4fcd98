"""
Application exceptions and error handling.

Defines custom exceptions and error handlers for consistent error responses.
Every error body has the shape ``{"error": {"type", "message", "details"?}}``.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .logging import get_logger

logger = get_logger(__name__)


# Custom Exceptions

class TrigonQuestError(Exception):
    """Base exception for service errors"""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class QuestionNotFoundError(TrigonQuestError):
    """Raised when a question id does not resolve"""

    def __init__(self, question_id: str):
        super().__init__(
            message=f"Question '{question_id}' not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"question_id": question_id}
        )
        self.question_id = question_id


class InvalidAnswerError(TrigonQuestError):
    """Raised when a submitted answer does not match the answer schema"""

    def __init__(self, errors: Optional[list] = None):
        super().__init__(
            message="Invalid answer format",
            status_code=status.HTTP_400_BAD_REQUEST,
            details={"errors": errors or []}
        )


class QuestionBankError(TrigonQuestError):
    """Raised when the question bank cannot be loaded"""

    def __init__(self, source: str, error: str):
        super().__init__(
            message=f"Failed to load question bank '{source}': {error}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details={"source": source, "error": error}
        )


# Error Response Models

def create_error_response(
    error: Exception,
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    include_details: bool = True
) -> JSONResponse:
    """Create standardized error response"""

    error_data: Dict[str, Any] = {
        "error": {
            "type": error.__class__.__name__,
            "message": str(error),
        }
    }

    if isinstance(error, TrigonQuestError) and include_details:
        error_data["error"]["details"] = error.details

    log = logger.error if status_code >= 500 else logger.warning
    log(
        f"Error occurred: {error}",
        extra_data={
            "error_type": error.__class__.__name__,
            "status_code": status_code,
        },
        exc_info=status_code >= 500
    )

    return JSONResponse(
        status_code=status_code,
        content=error_data
    )


# Exception Handlers

async def trigonquest_error_handler(request: Request, exc: TrigonQuestError) -> JSONResponse:
    """Handle TrigonQuestError exceptions"""
    return create_error_response(exc, exc.status_code)


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTPException exceptions"""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "type": "HTTPException",
                "message": exc.detail,
            }
        }
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle request validation errors"""
    logger.warning(
        "Validation error",
        extra_data={"path": request.url.path, "errors": exc.errors()}
    )

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": {
                "type": "ValidationError",
                "message": "Request validation failed",
                "details": jsonable_errors(exc.errors())
            }
        }
    )


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected errors"""
    logger.exception(
        "Unexpected error occurred",
        extra_data={"path": request.url.path}
    )

    # Don't expose internal errors in production
    from .config import settings
    include_details = settings.DEBUG

    message = str(exc) if include_details else "An internal error occurred"

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "type": "InternalServerError",
                "message": message,
            }
        }
    )


def jsonable_errors(errors: list) -> list:
    """Strip non-serializable context (e.g. exception objects) from pydantic errors"""
    return [
        {key: value for key, value in error.items() if key in ("type", "loc", "msg")}
        for error in errors
    ]


# Register all error handlers
def register_error_handlers(app):
    """Register error handlers with FastAPI app"""
    app.add_exception_handler(TrigonQuestError, trigonquest_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, generic_error_handler)
