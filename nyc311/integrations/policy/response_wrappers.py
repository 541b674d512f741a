from __future__ import annotations

import json
import logging
from typing import Any, Dict, Union

import httpx
from pydantic import BaseModel, Field, ValidationError

from nyc311.errors import ServiceRequestResponseError
from nyc311.integrations.contracts.service_requests import (
    ApiError,
    HttpError,
    ServiceRequestCreationResult,
    ServiceRequestRecord,
)

logger = logging.getLogger(__name__)


class _ErrorDetail(BaseModel):
    code: str = Field(alias="Code")
    message: str = Field(alias="Message")


class _ErrorEnvelope(BaseModel):
    error: _ErrorDetail = Field(alias="Error")


def decode_error_response(response: httpx.Response) -> Union[ApiError, HttpError]:
    """
    Turn a non-200 gateway response into an outcome value.

    A body of the form {"Error": {"Code": ..., "Message": ...}} yields ApiError.
    Anything else (empty, HTML, other JSON) yields HttpError with the status
    only; the parse problem is logged and never raised.
    """
    status = response.status_code
    try:
        envelope = _ErrorEnvelope.model_validate_json(response.content)
    except ValidationError as exc:
        logger.warning(
            "Undecodable error body (HTTP %s): %s",
            status,
            _snippet(response),
            exc_info=exc,
        )
        return HttpError(http_status=status)

    return ApiError(
        http_status=status,
        code=envelope.error.code,
        server_message=envelope.error.message,
    )


def normalize_creation_response(response: httpx.Response) -> ServiceRequestCreationResult:
    return _build_model(ServiceRequestCreationResult, _json_dict(response))


def normalize_record_response(response: httpx.Response) -> ServiceRequestRecord:
    return _build_model(ServiceRequestRecord, _json_dict(response))


def _json_dict(response: httpx.Response) -> Dict[str, Any]:
    try:
        payload = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ServiceRequestResponseError(f"Invalid JSON response: {_snippet(response)}") from exc
    if not isinstance(payload, dict):
        raise ServiceRequestResponseError("Invalid JSON response shape: expected object")
    return payload


def _snippet(response: httpx.Response, limit: int = 200) -> str:
    text = response.text.strip()
    return text[:limit] if text else "<empty>"


def _build_model(model_type, raw: Dict[str, Any]):
    try:
        return model_type.model_validate(raw)
    except ValidationError as exc:
        raise ServiceRequestResponseError(f"Response validation failed: {exc}", payload=raw) from exc
