"""Application settings."""

import logging
import warnings
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...domain.grammars import RFC6531_GRAMMAR, RFC6531_STRICT_GRAMMAR, LocalPartGrammar


class Settings(BaseSettings):
    """Application settings.

    Loaded from environment variables (or ``.env``) and validated.
    """

    app_name: str = Field(default="Web Identifiers API", description="API title")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level")

    # Validation strictness
    strict_unicode_quoted_local_part: bool = Field(
        default=False,
        description=(
            "Restrict quoted RFC 6531 local-parts to printable Unicode "
            "(letters, marks, numbers, punctuation, symbols, spaces)"
        ),
    )

    # CORS Configuration
    cors_allowed_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=False, description="Allow credentials in CORS requests"
    )
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    @field_validator("cors_allowed_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins."""
        if "*" in v and len(v) > 1:
            raise ValueError(
                "CORS: Cannot use wildcard '*' with other specific origins"
            )
        if "*" in v:
            warnings.warn(
                "Using wildcard '*' for CORS origins. This is insecure in production!",
                UserWarning,
                stacklevel=2,
            )
        return v

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @property
    def rfc6531_grammar(self) -> LocalPartGrammar:
        """Local-part grammar selected for internationalized addresses."""
        if self.strict_unicode_quoted_local_part:
            return RFC6531_STRICT_GRAMMAR
        return RFC6531_GRAMMAR


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance.

    Returns:
        Settings: Application settings
    """
    return Settings()
