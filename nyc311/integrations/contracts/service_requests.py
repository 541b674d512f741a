"""
Service request contracts.

Defines the response shapes of the two gateway operations and the outcome
values the client hands back to callers:
- CreateServiceRequest -> ServiceRequestCreationResult
- GetServiceRequest    -> ServiceRequestRecord

Every call resolves to exactly one of:
- Ok(value)        the 200 body, decoded
- ApiError(...)    a non-200 response with a structured Error body
- HttpError(...)   a non-200 response whose body could not be decoded

Callers are expected to ``match`` on the outcome rather than catch exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Generic, List, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from .interfaces import OptionSetCode, ServiceRequestPayload, ServiceRequestStatus

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class _ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class ServiceRequestCreationResult(_ResponseModel):
    sr_number: str = Field(alias="SRNumber")                # e.g. "311-10865100"
    sla_language: str = Field(alias="SLALanguage")


class ServiceRequestAddress(_ResponseModel):
    borough: str = Field(alias="Borough")
    full_address: str = Field(alias="FullAddress")


class ServiceRequestRecord(_ResponseModel):
    sr_number: str = Field(alias="SRNumber")
    agency: str = Field(alias="Agency")
    problem: str = Field(alias="Problem")
    problem_details: str = Field(alias="ProblemDetails")
    additional_details: str = Field(alias="AdditionalDetails")
    status: Annotated[ServiceRequestStatus, OptionSetCode] = Field(alias="Status")
    date_time_submitted: str = Field(alias="DateTimeSubmitted")
    address: ServiceRequestAddress = Field(alias="Address")


# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class ApiError:
    """Non-200 response the gateway explained with an Error.Code/Error.Message body."""
    http_status: int
    code: str
    server_message: str


@dataclass(frozen=True)
class HttpError:
    """Non-200 response with an unreadable body; only the status is known."""
    http_status: int


CreateOutcome = Union[Ok[ServiceRequestCreationResult], ApiError, HttpError]
GetOutcome = Union[Ok[ServiceRequestRecord], ApiError, HttpError]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def check_service_request_payload(payload: ServiceRequestPayload) -> List[str]:
    """
    Return advisories for fields the gateway may reject even though the
    documented schema marks them optional.
    Empty list means there is nothing to flag.
    """
    advisories: List[str] = []

    if payload.whattimeofdaydoestheproblemoccur is None:
        advisories.append(
            "whattimeofdaydoestheproblemoccur is not set; the gateway rejects some HPD "
            "requests without it"
        )

    return advisories
