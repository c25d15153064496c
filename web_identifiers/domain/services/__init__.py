"""Domain services package."""

from .profile_converter import EmailProfile, ProfileConverter

__all__ = ["EmailProfile", "ProfileConverter"]
