"""Validation, parsing and canonical rendering of domain names and email addresses."""

__version__ = "0.1.0"
