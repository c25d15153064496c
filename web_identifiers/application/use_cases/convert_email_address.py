"""Email address profile conversion use case."""

import logging

from pydantic import BaseModel, Field

from ...domain.services import EmailProfile, ProfileConverter
from .parse_identifier import ParseIdentifierUseCase

logger = logging.getLogger(__name__)


class ConvertEmailAddressInput(BaseModel):
    """Input DTO for profile conversion.

    Attributes:
        address: Address text in the source profile
        source: Profile to parse the address with
        target: Profile to convert to
    """

    address: str = Field(..., description="Address text")
    source: EmailProfile = Field(..., description="Source profile")
    target: EmailProfile = Field(..., description="Target profile")


class ConvertEmailAddressOutput(BaseModel):
    """Output DTO for profile conversion."""

    address: str = Field(..., description="Canonical form in the target profile")
    address_value: str = Field(..., description="Address without display name")
    source: EmailProfile = Field(..., description="Source profile")
    target: EmailProfile = Field(..., description="Target profile")


class ConvertEmailAddressUseCase:
    """Parse an address in one profile and convert it to another."""

    def __init__(
        self, parser: ParseIdentifierUseCase, converter: ProfileConverter
    ) -> None:
        """Initialize the use case.

        Args:
            parser: Identifier parsing use case
            converter: Profile converter
        """
        self._parser = parser
        self._converter = converter

    def execute(self, input_dto: ConvertEmailAddressInput) -> ConvertEmailAddressOutput:
        """Convert the address.

        Raises:
            IdentifierValidationError: If the address is invalid in the
                source profile, or its local-part is invalid in the target
            ConversionError: If the conversion is refused
        """
        address = self._parser.parse_email_address(input_dto.source, input_dto.address)
        converted = self._converter.convert(address, input_dto.target)
        logger.info(
            "Converted address from %s to %s", input_dto.source.value, input_dto.target.value
        )
        return ConvertEmailAddressOutput(
            address=str(converted),
            address_value=converted.address_value,
            source=input_dto.source,
            target=input_dto.target,
        )
