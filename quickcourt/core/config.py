"""
Application Configuration Module

Centralizes all configuration using environment variables with Pydantic Settings.
Supports three modes:
    - DEVELOPMENT: Uses the mock WhatsApp gateway (no Twilio account needed)
    - STAGING: Uses Twilio, typically with the WhatsApp sandbox sender
    - PRODUCTION: Uses Twilio with a dedicated WhatsApp Business sender

Settings are read once per process. Missing Twilio credentials are not an
error: the WhatsApp gateway is simply built in a disabled state and every
send reports failure for the life of the process.

Usage:
    from quickcourt.core.config import get_settings

    settings = get_settings()
    credentials = settings.gateway_credentials()
    if not credentials.is_complete:
        # Notifications will be skipped
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentMode(str, Enum):
    """
    Application environment modes.

    Attributes:
        DEVELOPMENT: Local testing with the mock gateway
        PRODUCTION: Live environment with Twilio WhatsApp
        STAGING: Pre-production testing against the Twilio sandbox
    """
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    STAGING = "staging"


@dataclass(frozen=True)
class GatewayCredentials:
    """
    Twilio credentials captured once at gateway construction.

    Attributes:
        account_sid: Twilio Account SID
        auth_token: Twilio Auth Token
        from_number: WhatsApp-enabled sender, with or without "whatsapp:" prefix
    """
    account_sid: Optional[str] = None
    auth_token: Optional[str] = None
    from_number: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        """All three values present and non-empty."""
        return all(
            value and value.strip()
            for value in (self.account_sid, self.auth_token, self.from_number)
        )

    @property
    def masked_account_sid(self) -> str:
        """Account SID safe for log output."""
        if not self.account_sid:
            return "MISSING"
        return f"{self.account_sid[:8]}..."


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    Twilio secrets should NEVER be committed to version control.

    Attributes:
        env_mode: Current environment (development/production/staging)
        debug: Enable verbose logging and error details

        # Twilio WhatsApp
        twilio_account_sid: Twilio Account SID
        twilio_auth_token: Twilio Auth Token
        twilio_whatsapp_from: WhatsApp sender number

        # Message formatting
        default_country_code: Country code assumed for bare local numbers
        notification_sign_off: Team name printed at the end of every message
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # ENVIRONMENT
    # ==========================================================================

    env_mode: EnvironmentMode = Field(
        default=EnvironmentMode.DEVELOPMENT,
        description="Application environment mode"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode with verbose logging"
    )

    # ==========================================================================
    # APPLICATION
    # ==========================================================================

    app_name: str = Field(
        default="QuickCourt Notifications",
        description="Application display name"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # ==========================================================================
    # TWILIO (WHATSAPP)
    # ==========================================================================

    twilio_account_sid: Optional[str] = Field(
        default=None,
        description="Twilio Account SID"
    )
    twilio_auth_token: Optional[str] = Field(
        default=None,
        description="Twilio Auth Token"
    )
    twilio_whatsapp_from: Optional[str] = Field(
        default=None,
        description="WhatsApp sender (e.g. +14155238886 for the Twilio sandbox)"
    )

    # ==========================================================================
    # MESSAGE FORMATTING
    # ==========================================================================

    default_country_code: str = Field(
        default="91",
        description="Country code prefixed to bare 10-digit numbers"
    )
    notification_sign_off: str = Field(
        default="QuickCourt Team",
        description="Sign-off line at the end of every message"
    )

    # ==========================================================================
    # VALIDATORS
    # ==========================================================================

    @field_validator("env_mode", mode="before")
    @classmethod
    def validate_env_mode(cls, v: str) -> EnvironmentMode:
        """Convert string to EnvironmentMode enum."""
        if isinstance(v, EnvironmentMode):
            return v
        try:
            return EnvironmentMode(v.lower())
        except ValueError:
            valid = [e.value for e in EnvironmentMode]
            raise ValueError(f"Invalid env_mode. Must be one of: {valid}")

    @field_validator("default_country_code", mode="before")
    @classmethod
    def validate_country_code(cls, v: str) -> str:
        """Accept "+91", "91" or " 91 " alike."""
        code = str(v).strip().lstrip("+")
        if not code.isdigit():
            raise ValueError("default_country_code must contain digits only")
        return code

    # ==========================================================================
    # COMPUTED PROPERTIES
    # ==========================================================================

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.env_mode == EnvironmentMode.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.env_mode == EnvironmentMode.PRODUCTION

    @property
    def is_staging(self) -> bool:
        """Check if running in staging mode."""
        return self.env_mode == EnvironmentMode.STAGING

    @property
    def use_real_services(self) -> bool:
        """Check if real external services should be used."""
        return self.env_mode in (EnvironmentMode.PRODUCTION, EnvironmentMode.STAGING)

    def gateway_credentials(self) -> GatewayCredentials:
        """Snapshot of the Twilio credentials for gateway construction."""
        return GatewayCredentials(
            account_sid=self.twilio_account_sid,
            auth_token=self.twilio_auth_token,
            from_number=self.twilio_whatsapp_from,
        )

    # ==========================================================================
    # VALIDATION METHODS
    # ==========================================================================

    def validate_production_config(self) -> list[str]:
        """
        Validate that all required production settings are configured.

        Returns:
            List of missing configuration keys (empty if all present)
        """
        missing = []

        if self.use_real_services:
            if not self.twilio_account_sid:
                missing.append("TWILIO_ACCOUNT_SID")
            if not self.twilio_auth_token:
                missing.append("TWILIO_AUTH_TOKEN")
            if not self.twilio_whatsapp_from:
                missing.append("TWILIO_WHATSAPP_FROM")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Settings are loaded only once so that the gateway's enabled/disabled
    decision stays fixed for the process lifetime.

    Returns:
        Settings: Configured application settings
    """
    return Settings()


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure application-wide logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Configured package logger
    """
    settings = get_settings()

    if settings.debug:
        level = logging.DEBUG

    log_format = "%(asctime)s │ %(levelname)-8s │ %(name)-25s │ %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    logging.basicConfig(
        level=level,
        format=log_format,
        datefmt=date_format,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Twilio logs full request/response bodies at INFO
    logging.getLogger("twilio.http_client").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logging.getLogger("quickcourt")
