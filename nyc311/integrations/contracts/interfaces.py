from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)


HPD_AGENCY = "HPD"


def _require_int_code(value: Any) -> Any:
    # Option-set codes are JSON integers; "614110000", 614110000.0 and True are not codes.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer option-set code, got {value!r}")
    return value


OptionSetCode = BeforeValidator(_require_int_code)


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class AnonymousRequired(str, Enum):
    YES = "Yes"
    NO = "No"


class ServiceRequestSource(int, Enum):
    """Origin of the request, as the gateway's option-set codes."""

    ANDROID = 614110000
    IPHONE = 614110001
    OTHER = 614110002
    DEFAULT = 614110003


class TimeOfDay(int, Enum):
    MORNING_9AM_TO_12PM = 614110000
    AFTERNOON_12PM_TO_5PM = 614110001
    EVENING_5PM_TO_9PM = 614110002
    NIGHT_9PM_TO_12AM = 614110003
    OVERNIGHT_12AM_TO_9AM = 614110004
    ALL_THE_TIME = 614110005

    @property
    def label(self) -> str:
        return _TIME_OF_DAY_LABELS[self]


_TIME_OF_DAY_LABELS = {
    TimeOfDay.MORNING_9AM_TO_12PM: "9AM - 12PM",
    TimeOfDay.AFTERNOON_12PM_TO_5PM: "12PM - 5PM",
    TimeOfDay.EVENING_5PM_TO_9PM: "5PM - 9PM",
    TimeOfDay.NIGHT_9PM_TO_12AM: "9PM - 12AM",
    TimeOfDay.OVERNIGHT_12AM_TO_9AM: "12AM - 9AM",
    TimeOfDay.ALL_THE_TIME: "All the time",
}


class ServiceRequestStatus(int, Enum):
    """Status codes reported by GetServiceRequest. Never sent by the client."""

    OPEN = 614110000
    IN_PROGRESS = 614110001
    CANCELLED = 614110002
    CLOSED = 614110003

    @property
    def is_terminal(self) -> bool:
        return self in {ServiceRequestStatus.CANCELLED, ServiceRequestStatus.CLOSED}


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class WireModel(BaseModel):
    """Immutable model that round-trips through the gateway's field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    def to_wire(self) -> Dict[str, Any]:
        """JSON-ready body keyed by wire names, with unset optionals omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class Contact(WireModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    notification_email: str = Field(alias="notificationEmail")
    primary_phone: Optional[str] = Field(default=None, alias="primaryPhone")
    street1: Optional[str] = None
    street2: Optional[str] = None
    borough: Optional[str] = None
    # Absent and explicit null are distinct on the wire; see _keep_explicit_null_zip.
    zip_code: Optional[str] = Field(default=None, alias="zipCode")
    city: Optional[str] = None
    state: Optional[str] = None

    @model_serializer(mode="wrap")
    def _keep_explicit_null_zip(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> Dict[str, Any]:
        data = handler(self)
        if self.zip_code is None and "zip_code" in self.model_fields_set:
            data["zipCode" if info.by_alias else "zip_code"] = None
        return data


class AddOnProblem(WireModel):
    problem: str
    problem_details: str = Field(alias="problemDetails")
    additional_details: str = Field(alias="additionalDetails")


class ServiceRequestPayload(WireModel):
    """Body accepted by CreateServiceRequest for the HPD payload family."""

    description: str
    location_type: str = Field(alias="locationType")
    problem: str
    problem_details: str = Field(alias="problemDetails")
    srsource: Optional[Annotated[ServiceRequestSource, OptionSetCode]] = None
    additional_details: str = Field(alias="additionalDetails")
    agency: Literal["HPD"] = HPD_AGENCY
    anonymous_required: AnonymousRequired = Field(alias="anonymousRequired")
    date_time_observed: str = Field(alias="dateTimeObserved")   # not parsed, sent verbatim
    full_address: str = Field(alias="fullAddress")
    include_contact_info: Optional[bool] = Field(default=None, alias="includeContactInfo")
    location_details: str = Field(alias="locationDetails")
    site_borough: Optional[str] = Field(default=None, alias="siteBorough")
    whattimeofdaydoestheproblemoccur: Optional[Annotated[TimeOfDay, OptionSetCode]] = None
    apartment_number: Optional[str] = Field(default=None, alias="apartmentNumber")
    contact: Contact
    addonproblems: Optional[List[AddOnProblem]] = None
