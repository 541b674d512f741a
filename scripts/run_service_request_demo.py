#!/usr/bin/env python3
"""
Create one HPD service request against the NYC 311 gateway, then look it up.

Requires SUBSCRIPTION_KEY in the environment or a .env file.

Usage (from repo root):
  python scripts/run_service_request_demo.py
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from nyc311.errors import MissingCredentialError
from nyc311.integrations import (
    AnonymousRequired,
    ApiError,
    Contact,
    HttpError,
    Ok,
    ServiceRequestClient,
    ServiceRequestPayload,
    ServiceRequestSource,
    TimeOfDay,
)

logger = logging.getLogger("run_service_request_demo")


def setup_logging():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stdout,
    )


def print_stage(title: str, data: dict | str):
    print("\n" + "=" * 60)
    print(f"  {title}")
    print("=" * 60)
    if isinstance(data, dict):
        print(json.dumps(data, indent=2, default=str))
    else:
        print(data)
    print()


def build_payload() -> ServiceRequestPayload:
    return ServiceRequestPayload(
        description="N/A",
        location_type="Apartment",
        problem="Heat/Hot Water",
        problem_details="Apartment Only",
        srsource=ServiceRequestSource.ANDROID,
        additional_details="No Heat",
        anonymous_required=AnonymousRequired.NO,
        date_time_observed="10/02/2018 15:31:33",
        full_address="1681 Madison Ave, Manhattan",
        include_contact_info=True,
        location_details="Bedroom",
        site_borough="BROOKLYN",
        whattimeofdaydoestheproblemoccur=TimeOfDay.MORNING_9AM_TO_12PM,
        apartment_number="1A",
        contact=Contact(
            first_name="Alfred",
            last_name="Eng",
            notification_email="aeng@doitt.nyc.gov",
            primary_phone="1234567890",
        ),
    )


def describe_failure(outcome) -> str:
    match outcome:
        case ApiError(http_status=status, code=code, server_message=message):
            return f"HTTP {status} {code}: {message}"
        case HttpError(http_status=status):
            return f"HTTP {status} (no error details)"
    return repr(outcome)


async def main() -> int:
    setup_logging()
    try:
        client = ServiceRequestClient.from_env()
    except MissingCredentialError as e:
        logger.error("%s Set it in the environment or a .env file.", e)
        return 2

    payload = build_payload()
    print_stage("CREATE: payload", payload.to_wire())

    created = await client.create_service_request(payload)
    if not isinstance(created, Ok):
        print_stage("CREATE: failed", describe_failure(created))
        return 1
    print_stage("CREATE: result", created.value.model_dump())

    fetched = await client.get_service_request(created.value.sr_number)
    if not isinstance(fetched, Ok):
        print_stage("GET: failed", describe_failure(fetched))
        return 1
    record = fetched.value
    print_stage("GET: record", {**record.model_dump(), "status": record.status.name})
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
