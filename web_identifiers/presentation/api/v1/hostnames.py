"""Host name inspection endpoints."""

from fastapi import APIRouter, Query
from pydantic import BaseModel, Field

from ....domain.exceptions import IdentifierValidationError
from ....domain.value_objects import Hostname
from ..errors import to_http_exception

router = APIRouter(prefix="/hostnames", tags=["hostnames"])


class HostnameResponse(BaseModel):
    """Host name structure."""

    hostname: Hostname = Field(..., description="Canonical host name")
    labels: list[str] = Field(..., description="Labels, left to right")
    tld: str = Field(..., description="Top-level label")
    sld: str | None = Field(None, description="Second-level label")
    parent: Hostname | None = Field(None, description="Host name without its leftmost label")
    root: Hostname | None = Field(None, description="Rightmost two labels")
    is_subdomain_of: bool | None = Field(
        None, description="Whether the host name lies below the requested parent"
    )


@router.get(
    "/{hostname}",
    response_model=HostnameResponse,
    summary="Describe a host name",
)
async def describe_hostname(
    hostname: str,
    parent: str | None = Query(None, description="Candidate parent host name"),
) -> HostnameResponse:
    """Validate a host name and return its derived values.

    Args:
        hostname: Host name text
        parent: Optional candidate parent for the subdomain check

    Returns:
        Host name description

    Raises:
        HTTPException: If either host name is invalid (422)
    """
    try:
        value = Hostname.parse(hostname)
        candidate = Hostname.parse(parent) if parent is not None else None
    except IdentifierValidationError as e:
        raise to_http_exception(e) from e

    return HostnameResponse(
        hostname=value,
        labels=[label.value for label in value.labels],
        tld=value.tld.value,
        sld=value.sld.value if value.sld else None,
        parent=value.parent(),
        root=value.root(),
        is_subdomain_of=value.is_subdomain_of(candidate) if candidate else None,
    )
