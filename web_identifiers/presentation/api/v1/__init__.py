"""API version 1."""

from fastapi import APIRouter

from .email_addresses import router as email_addresses_router
from .hostnames import router as hostnames_router
from .identifiers import router as identifiers_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(identifiers_router)
v1_router.include_router(hostnames_router)
v1_router.include_router(email_addresses_router)

__all__ = ["v1_router"]
