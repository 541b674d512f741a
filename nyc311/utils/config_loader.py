"""
Configuration loader for the NYC 311 client
"""

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from nyc311.errors import MissingCredentialError

logger = logging.getLogger(__name__)

DEFAULT_GATEWAY_URL = "https://apim-gw-azu-nyc-nonprod.azure-api.net"

SUBSCRIPTION_KEY_ENV = "SUBSCRIPTION_KEY"
GATEWAY_URL_ENV = "NYC311_GATEWAY_URL"
TIMEOUT_ENV = "NYC311_TIMEOUT_SECONDS"


class ServiceRequestSettings(BaseModel):
    """Gateway connection settings"""

    model_config = ConfigDict(frozen=True)

    subscription_key: str = Field(repr=False)
    gateway_url: str = DEFAULT_GATEWAY_URL
    # None leaves the call unbounded; callers may impose their own deadline.
    timeout_seconds: Optional[float] = Field(default=None, gt=0)

    @field_validator("subscription_key")
    @classmethod
    def _strip_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            # Not a ValueError, so pydantic lets it through unwrapped.
            raise MissingCredentialError(f"{SUBSCRIPTION_KEY_ENV} is not configured.")
        return value

    @field_validator("gateway_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")


def load_settings(dotenv_path: Optional[str] = None) -> ServiceRequestSettings:
    """
    Load gateway settings from the environment (and a .env file if present)

    Args:
        dotenv_path: Explicit .env file. Defaults to python-dotenv's lookup.

    Returns:
        Validated ServiceRequestSettings

    Raises:
        MissingCredentialError: If SUBSCRIPTION_KEY is absent or blank
        ValueError: If another setting is invalid
    """
    load_dotenv(dotenv_path)

    subscription_key = os.getenv(SUBSCRIPTION_KEY_ENV, "").strip()
    if not subscription_key:
        raise MissingCredentialError(f"{SUBSCRIPTION_KEY_ENV} is not configured.")

    timeout_raw = os.getenv(TIMEOUT_ENV, "").strip()

    try:
        settings = ServiceRequestSettings(
            subscription_key=subscription_key,
            gateway_url=os.getenv(GATEWAY_URL_ENV) or DEFAULT_GATEWAY_URL,
            timeout_seconds=float(timeout_raw) if timeout_raw else None,
        )
    except ValidationError as e:
        logger.error(f"Invalid NYC 311 configuration: {e.error_count()} error(s)")
        raise ValueError(f"Invalid NYC 311 configuration: {e}") from e

    logger.info(f"Loaded NYC 311 settings for gateway {settings.gateway_url}")
    return settings
