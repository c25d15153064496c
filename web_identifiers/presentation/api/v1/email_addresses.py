"""Email address endpoints."""

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ....application.use_cases import (
    ConvertEmailAddressInput,
    ConvertEmailAddressOutput,
    ConvertEmailAddressUseCase,
)
from ....domain.exceptions import ConversionError, IdentifierValidationError
from ....domain.services import EmailProfile
from ....domain.value_objects import EmailAddressRecord, EmailAddressRFC5322
from ...dependencies import get_convert_email_address_use_case
from ..errors import to_http_exception

router = APIRouter(prefix="/email-addresses", tags=["email-addresses"])


class ConvertEmailAddressRequest(BaseModel):
    """Profile conversion request."""

    address: str = Field(..., description="Address text in the source profile")
    source: EmailProfile = Field(..., description="Source profile")
    target: EmailProfile = Field(..., description="Target profile")


class RecipientsRequest(BaseModel):
    """Recipients given as strings or as ``{address, displayName}`` records."""

    recipients: list[EmailAddressRFC5322] = Field(
        ..., description="Recipient addresses", min_length=1, max_length=100
    )


class RecipientsResponse(BaseModel):
    """Recipients in canonical string and record form."""

    recipients: list[EmailAddressRFC5322] = Field(..., description="Canonical addresses")
    records: list[EmailAddressRecord] = Field(..., description="Record form")


@router.post(
    "/convert",
    response_model=ConvertEmailAddressOutput,
    summary="Convert an address between profiles",
    description="Parses the address in the source profile and converts it to the target profile.",
)
async def convert_email_address(
    request: ConvertEmailAddressRequest,
    use_case: ConvertEmailAddressUseCase = Depends(get_convert_email_address_use_case),
) -> ConvertEmailAddressOutput:
    """Convert an email address.

    Args:
        request: Conversion request
        use_case: Conversion use case

    Returns:
        Converted address

    Raises:
        HTTPException: 422 if the address is invalid, 409 if the conversion is refused
    """
    try:
        return use_case.execute(
            ConvertEmailAddressInput(
                address=request.address,
                source=request.source,
                target=request.target,
            )
        )
    except (IdentifierValidationError, ConversionError) as e:
        raise to_http_exception(e) from e


@router.post(
    "/recipients",
    response_model=RecipientsResponse,
    summary="Normalize a recipient list",
)
async def normalize_recipients(request: RecipientsRequest) -> RecipientsResponse:
    """Return each recipient in canonical and record form.

    Invalid recipients are rejected by request validation (422).
    """
    return RecipientsResponse(
        recipients=request.recipients,
        records=[recipient.to_record() for recipient in request.recipients],
    )
