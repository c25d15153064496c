"""Mapping of domain exceptions to HTTP errors."""

import logging

from fastapi import HTTPException, status

from ...domain.exceptions import (
    ConversionError,
    DomainException,
    IdentifierValidationError,
)

logger = logging.getLogger(__name__)


def error_detail(error: DomainException) -> dict:
    """Return the structured ``detail`` body for a domain exception."""
    return {"code": error.code, "message": str(error), "context": error.context}


def to_http_exception(error: DomainException) -> HTTPException:
    """Translate a domain exception into an ``HTTPException``.

    Validation failures become 422, refused conversions 409.
    """
    if isinstance(error, IdentifierValidationError):
        # Literal code; the Starlette constant for 422 was renamed
        status_code = 422
    elif isinstance(error, ConversionError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.debug("Rejected request: %s (%s)", error, error.code)
    return HTTPException(status_code=status_code, detail=error_detail(error))
