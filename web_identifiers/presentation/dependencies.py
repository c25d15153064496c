"""FastAPI dependency wiring."""

from fastapi import Depends

from ..application.use_cases import ConvertEmailAddressUseCase, ParseIdentifierUseCase
from ..domain.services import ProfileConverter
from ..infrastructure.config.settings import Settings, get_settings


def get_profile_converter() -> ProfileConverter:
    """Return the profile converter.

    Returns:
        ProfileConverter: Stateless converter
    """
    return ProfileConverter()


def get_parse_identifier_use_case(
    settings: Settings = Depends(get_settings),
) -> ParseIdentifierUseCase:
    """Return the identifier parsing use case.

    Args:
        settings: Application settings

    Returns:
        ParseIdentifierUseCase: Parsing use case
    """
    return ParseIdentifierUseCase(settings=settings)


def get_convert_email_address_use_case(
    parser: ParseIdentifierUseCase = Depends(get_parse_identifier_use_case),
    converter: ProfileConverter = Depends(get_profile_converter),
) -> ConvertEmailAddressUseCase:
    """Return the profile conversion use case.

    Args:
        parser: Identifier parsing use case
        converter: Profile converter

    Returns:
        ConvertEmailAddressUseCase: Conversion use case
    """
    return ConvertEmailAddressUseCase(parser=parser, converter=converter)
