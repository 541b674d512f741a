"""Exceptions for failures that are not decoded API responses.

Non-200 responses from the gateway are returned as values (see
``nyc311.integrations.contracts.service_requests``); the exceptions here cover
everything that prevents such a value from being produced.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ServiceRequestError(Exception):
    """Base class for client-side failures."""


class MissingCredentialError(ServiceRequestError):
    """Raised before any network call when no subscription key is configured."""


class ServiceRequestTransportError(ServiceRequestError):
    def __init__(self, message: str, *, url: str) -> None:
        super().__init__(message)
        self.url = url


class ServiceRequestResponseError(ServiceRequestError, ValueError):
    """A 200 response whose body does not match the expected contract."""

    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}
