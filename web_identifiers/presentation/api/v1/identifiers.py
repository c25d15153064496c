"""Identifier parsing endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ....application.use_cases import (
    IdentifierKind,
    ParseIdentifierInput,
    ParseIdentifierOutput,
    ParseIdentifierUseCase,
)
from ....domain.exceptions import IdentifierValidationError
from ...dependencies import get_parse_identifier_use_case
from ..errors import to_http_exception

router = APIRouter(prefix="/identifiers", tags=["identifiers"])


class ParseIdentifierRequest(BaseModel):
    """Identifier parsing request."""

    kind: IdentifierKind = Field(..., description="Identifier grammar")
    text: str = Field(..., description="Raw identifier text")


@router.post(
    "/parse",
    response_model=ParseIdentifierOutput,
    summary="Parse and canonicalize an identifier",
    description="Validates the text against the requested grammar and returns its canonical form.",
)
async def parse_identifier(
    request: ParseIdentifierRequest,
    use_case: ParseIdentifierUseCase = Depends(get_parse_identifier_use_case),
) -> ParseIdentifierOutput:
    """Parse an identifier.

    Args:
        request: Parsing request
        use_case: Parsing use case

    Returns:
        Parsed identifier description

    Raises:
        HTTPException: If the text is invalid (422)
    """
    try:
        return use_case.execute(
            ParseIdentifierInput(kind=request.kind, text=request.text)
        )
    except IdentifierValidationError as e:
        raise to_http_exception(e) from e
