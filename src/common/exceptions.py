from enum import Enum
import logging
from typing import Any
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class ResourceType(str, Enum):
    TASK = "Task"


# Exceptions
class ResourceNotFoundException(Exception):
    def __init__(self, resource_type: ResourceType, identifier: str):
        self.resource_type = resource_type.value
        self.identifier = identifier
        super().__init__(f"{self.resource_type} '{identifier}' not found")


class InvalidRequestException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedMediaTypeException(Exception):
    def __init__(self, message: str):
        super().__init__(message)


# Exception handlers
def resource_not_found_handler(request: Request, exc: ResourceNotFoundException):
    logger.error(exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)


def invalid_request_handler(request: Request, exc: InvalidRequestException):
    logger.error(exc)
    return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)


def unsupported_media_type_handler(
    request: Request, exc: UnsupportedMediaTypeException
):
    logger.error(exc)
    return PlainTextResponse(
        str(exc), status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE
    )


def unexpected_exception_handler(request: Request, exc: Exception):
    logger.error(exc)
    return PlainTextResponse(
        str(exc) or "An unexpected error occurred",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def loc_to_dot_sep(loc: tuple[Any, ...]) -> str:
    """Convert a tuple of location parts to a dot-separated string"""
    path = ""
    for i, x in enumerate(loc):
        if isinstance(x, str):
            if i > 0:
                path += "."
            path += x
        elif isinstance(x, int):
            path += f"[{x}]"
        else:
            raise TypeError("Unexpected type")
    return path


def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = "; ".join(
        f"{loc_to_dot_sep(error['loc'])}: {error['msg']}" for error in exc.errors()
    )
    message = f"Invalid request {request.url.path}: {errors}"
    logger.error(message)
    return PlainTextResponse(message, status_code=status.HTTP_400_BAD_REQUEST)


# Response definitions for OpenAPI documentation
ResponseDict = dict[int | str, dict[str, Any]]


def resource_not_found_response(
    resource_type: ResourceType,
) -> ResponseDict:
    return {
        404: {
            "description": f"{resource_type.value} not found",
            "content": {
                "text/plain": {"example": f"{resource_type.value} '1' not found"}
            },
        }
    }


def bad_request_response(example: str) -> ResponseDict:
    return {
        400: {
            "description": "Bad request",
            "content": {"text/plain": {"example": example}},
        }
    }


unsupported_media_type_response: ResponseDict = {
    415: {
        "description": "Unsupported media type",
        "content": {
            "text/plain": {"example": "expect application/json Content-Type"}
        },
    }
}

internal_error_response: ResponseDict = {
    500: {
        "description": "Internal server error",
        "content": {"text/plain": {"example": "An unexpected error occurred"}},
    }
}
