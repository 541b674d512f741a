"""
Integrations layer.

This package contains the code used to talk to the NYC 311 gateway:
- contracts/: payload, response and outcome models
- policy/: normalization of success bodies and decoding of error bodies
- clients/real_http/: the HTTP client issuing CreateServiceRequest / GetServiceRequest

Key rule:
- Callers MUST NOT build gateway requests by hand; use ServiceRequestClient.
"""

from .contracts.interfaces import (
    HPD_AGENCY,
    AddOnProblem,
    AnonymousRequired,
    Contact,
    ServiceRequestPayload,
    ServiceRequestSource,
    ServiceRequestStatus,
    TimeOfDay,
)
from .contracts.service_requests import (
    ApiError,
    CreateOutcome,
    GetOutcome,
    HttpError,
    Ok,
    ServiceRequestAddress,
    ServiceRequestCreationResult,
    ServiceRequestRecord,
    check_service_request_payload,
)
from .clients.real_http.service_requests import ServiceRequestClient

__all__ = [
    # interfaces
    "HPD_AGENCY", "AddOnProblem", "AnonymousRequired", "Contact",
    "ServiceRequestPayload", "ServiceRequestSource", "ServiceRequestStatus", "TimeOfDay",
    # service requests
    "ApiError", "CreateOutcome", "GetOutcome", "HttpError", "Ok",
    "ServiceRequestAddress", "ServiceRequestCreationResult", "ServiceRequestRecord",
    "check_service_request_payload",
    # clients
    "ServiceRequestClient",
]
