"""
Real NYC 311 Service Request HTTP Client.

Purpose:
- Submits HPD complaint payloads to CreateServiceRequest
- Looks up a request's status by SR number through GetServiceRequest
- Decodes 200 bodies into contract models and non-200 bodies into ApiError/HttpError

Implementation notes:
- One httpx.AsyncClient per call; no session or connection reuse between calls
- No retries and no default timeout; both belong to the caller
- The subscription key is sent on every request and never logged

Important:
- Keep this client as the ONLY place where gateway HTTP calls are made.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import httpx

from nyc311.errors import ServiceRequestTransportError
from nyc311.integrations.contracts.interfaces import ServiceRequestPayload
from nyc311.integrations.contracts.service_requests import (
    CreateOutcome,
    GetOutcome,
    Ok,
    check_service_request_payload,
)
from nyc311.integrations.policy.response_wrappers import (
    decode_error_response,
    normalize_creation_response,
    normalize_record_response,
)
from nyc311.utils.config_loader import ServiceRequestSettings, load_settings

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"


class ServiceRequestClient:
    create_path = "/create-sr/api/CreateServiceRequest"
    get_path = "/public/api/GetServiceRequest"

    def __init__(
        self,
        settings: ServiceRequestSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "ServiceRequestClient":
        """Build a client from SUBSCRIPTION_KEY / NYC311_* environment settings."""
        return cls(load_settings(dotenv_path))

    async def create_service_request(self, payload: ServiceRequestPayload) -> CreateOutcome:
        """
        Submit one HPD service request.

        Each call creates a distinct request on the gateway, even for an
        identical payload.
        """
        for advisory in check_service_request_payload(payload):
            logger.warning("CreateServiceRequest payload advisory: %s", advisory)

        url = self._make_url(self.create_path)
        logger.info(f"Submitting HPD service request to {url}")
        response = await self._send(
            "POST",
            url,
            json=payload.to_wire(),
            headers=self._headers(json_body=True),
        )
        logger.info(f"CreateServiceRequest responded: status={response.status_code}")

        if response.status_code != 200:
            return decode_error_response(response)
        return Ok(normalize_creation_response(response))

    async def get_service_request(self, sr_number: str) -> GetOutcome:
        """
        Fetch the status record for a previously created request.

        sr_number is sent exactly as given (percent-encoded); a blank value
        raises ValueError without contacting the gateway.
        """
        if not sr_number or not str(sr_number).strip():
            raise ValueError("sr_number is required")

        url = self._make_url(self.get_path)
        logger.info(f"Fetching service request {sr_number}")
        response = await self._send(
            "GET",
            url,
            params={"SRNumber": sr_number},
            headers=self._headers(),
        )
        logger.info(f"GetServiceRequest responded: status={response.status_code}")

        if response.status_code != 200:
            return decode_error_response(response)
        return Ok(normalize_record_response(response))

    # ------------------------------------------------------------------
    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        headers = {SUBSCRIPTION_KEY_HEADER: self.settings.subscription_key}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _make_url(self, path: str) -> str:
        return f"{self.settings.gateway_url}{path}"

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        async with httpx.AsyncClient(
            timeout=self.settings.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                return await client.request(method, url, **kwargs)
            except httpx.RequestError as e:
                logger.error(f"Request error contacting NYC 311 gateway at {url}: {e!r}")
                raise ServiceRequestTransportError(
                    f"Request error contacting {url}: {e}", url=url
                ) from e
