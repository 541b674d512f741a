"""Pytest fixtures for NYC 311 service request tests."""

import copy
import json

import httpx
import pytest

from nyc311.integrations.clients.real_http.service_requests import ServiceRequestClient
from nyc311.utils.config_loader import ServiceRequestSettings

TEST_SUBSCRIPTION_KEY = "test-subscription-key-0123456789"
TEST_GATEWAY = "https://gateway.test"

# CreateServiceRequest example from the gateway developer portal.
_PORTAL_EXAMPLE = {
    "description": "N/A",
    "locationType": "Apartment",
    "problem": "Heat/Hot Water",
    "problemDetails": "Apartment Only",
    "srsource": 614110000,
    "additionalDetails": "No Heat",
    "agency": "HPD",
    "anonymousRequired": "No",
    "dateTimeObserved": "10/02/2018 15:31:33",
    "fullAddress": "1681 Madison Ave, Manhattan",
    "includeContactInfo": True,
    "locationDetails": "Bedroom",
    "siteBorough": "BROOKLYN",
    "whattimeofdaydoestheproblemoccur": 614110000,
    "apartmentNumber": "1A",
    "contact": {
        "firstName": "Alfred",
        "lastName": "Eng",
        "notificationEmail": "aeng@doitt.nyc.gov",
        "primaryPhone": "1234567890",
    },
}

# CreateServiceRequest example from the API guide (page 27). The live gateway
# rejects it because the time-of-day bucket is missing.
_GUIDE_EXAMPLE = {
    "problem": "General",
    "problemDetails": "Cooking Gas",
    "additionalDetails": "Shut-Off",
    "locationType": "Building-Wide",
    "locationDetails": "Building-Wide",
    "anonymousRequired": "Yes",
    "description": "Flooring and more",
    "dateTimeObserved": "2018-05-18",
    "agency": "HPD",
    "fullAddress": "1020340003",
    "contact": {
        "notificationEmail": "test2@ia.com",
        "firstName": "Tom",
        "lastName": "Smithh",
        "street1": "102",
        "street2": "Broadway",
        "borough": "Manhattan",
        "zipCode": None,
        "city": "New York",
        "state": "NY",
    },
    "addonproblems": [
        {
            "problem": "General",
            "problemDetails": "Cooking Gas",
            "additionalDetails": "Shut-Off",
        }
    ],
}


@pytest.fixture
def portal_example_wire():
    return copy.deepcopy(_PORTAL_EXAMPLE)


@pytest.fixture
def guide_example_wire():
    return copy.deepcopy(_GUIDE_EXAMPLE)


@pytest.fixture
def settings():
    return ServiceRequestSettings(subscription_key=TEST_SUBSCRIPTION_KEY, gateway_url=TEST_GATEWAY)


class RecordingHandler:
    """httpx.MockTransport handler that replays canned responses and records requests."""

    def __init__(self, *responses):
        self._responses = list(responses)
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def json_body(self, index: int = 0):
        return json.loads(self.requests[index].content)


@pytest.fixture
def make_client(settings):
    def _make(*responses):
        handler = RecordingHandler(*responses)
        client = ServiceRequestClient(settings, transport=httpx.MockTransport(handler))
        return client, handler

    return _make
