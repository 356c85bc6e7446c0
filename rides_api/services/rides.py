"""
Ride service
============

Orchestrates one request: coerce and validate input, call the ride store,
map the outcome.  Failures are raised as :class:`RideError`; the API layer
renders them as ``{"error_code", "message"}`` bodies.

Validation is fail-fast and ordered: start coordinates, end coordinates,
rider name, driver name, driver vehicle.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

from rides_api.domain.entities import PersistenceError, Ride, RideError, RideFields
from rides_api.domain.enums import ErrorCode
from rides_api.domain.validation import (
    MAX_INTEGER,
    coerce_coordinate,
    is_non_empty_text,
    is_valid_latitude,
    is_valid_longitude,
)
from rides_api.infrastructure.repositories import RideRepository

logger = logging.getLogger(__name__)

START_COORDINATES_MESSAGE = (
    "Start latitude and longitude must be between -90 - 90 "
    "and -180 to 180 degrees respectively"
)
END_COORDINATES_MESSAGE = (
    "End latitude and longitude must be between -90 - 90 "
    "and -180 to 180 degrees respectively"
)
RIDER_NAME_MESSAGE = "Rider name must be a non empty string"
DRIVER_NAME_MESSAGE = "Driver name must be a non empty string"
DRIVER_VEHICLE_MESSAGE = "Driver vehicle must be a non empty string"
NOT_FOUND_MESSAGE = "Could not find any rides"
UNKNOWN_ERROR_MESSAGE = "Unknown error"

_RIDE_ID_PATTERN = re.compile(r"-?[0-9]+")


def _valid_point(lat: Optional[float], long: Optional[float]) -> bool:
    return (
        lat is not None
        and long is not None
        and is_valid_latitude(lat)
        and is_valid_longitude(long)
    )


def validate_ride(payload: Mapping[str, Any]) -> RideFields:
    """Validate raw request values; missing keys count as invalid.

    Returns the validated fields or raises ``RideError(VALIDATION_ERROR)``.
    """
    start_lat = coerce_coordinate(payload.get("start_lat"))
    start_long = coerce_coordinate(payload.get("start_long"))
    if not _valid_point(start_lat, start_long):
        raise RideError(ErrorCode.VALIDATION_ERROR, START_COORDINATES_MESSAGE)

    end_lat = coerce_coordinate(payload.get("end_lat"))
    end_long = coerce_coordinate(payload.get("end_long"))
    if not _valid_point(end_lat, end_long):
        raise RideError(ErrorCode.VALIDATION_ERROR, END_COORDINATES_MESSAGE)

    if not is_non_empty_text(payload.get("rider_name")):
        raise RideError(ErrorCode.VALIDATION_ERROR, RIDER_NAME_MESSAGE)
    if not is_non_empty_text(payload.get("driver_name")):
        raise RideError(ErrorCode.VALIDATION_ERROR, DRIVER_NAME_MESSAGE)
    if not is_non_empty_text(payload.get("driver_vehicle")):
        raise RideError(ErrorCode.VALIDATION_ERROR, DRIVER_VEHICLE_MESSAGE)

    return RideFields(
        start_lat=start_lat,
        start_long=start_long,
        end_lat=end_lat,
        end_long=end_long,
        rider_name=payload.get("rider_name"),
        driver_name=payload.get("driver_name"),
        driver_vehicle=payload.get("driver_vehicle"),
    )


def parse_ride_id(token: str) -> Optional[int]:
    """Parse a path segment into a ride id; ``None`` if it cannot match a row."""
    if not _RIDE_ID_PATTERN.fullmatch(token):
        return None
    ride_id = int(token)
    if abs(ride_id) > MAX_INTEGER:
        return None
    return ride_id


def _server_error() -> RideError:
    return RideError(ErrorCode.SERVER_ERROR, UNKNOWN_ERROR_MESSAGE)


def _not_found() -> RideError:
    return RideError(ErrorCode.RIDES_NOT_FOUND_ERROR, NOT_FOUND_MESSAGE)


class RideService:
    def __init__(self, store: RideRepository):
        self.store = store

    async def create_ride(self, payload: Mapping[str, Any]) -> list[Ride]:
        try:
            fields = validate_ride(payload)
        except RideError as exc:
            logger.info("Rejected ride: %s", exc.message)
            raise

        try:
            ride_id = await self.store.create(fields)
            rides = await self.store.find_by_id(ride_id)
        except PersistenceError:
            logger.exception("Failed to create ride")
            raise _server_error()

        logger.info("Created ride %d", ride_id)
        return rides

    async def list_rides(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> list[Ride]:
        """All rides, or a page of at most *limit* rows when *limit* > 0."""
        if limit is None or limit <= 0:
            offset, limit = 0, None
        else:
            offset = min(max(offset, 0), MAX_INTEGER)
            limit = min(limit, MAX_INTEGER)

        try:
            rides = await self.store.find_all(offset=offset, limit=limit)
        except PersistenceError:
            logger.exception("Failed to list rides")
            raise _server_error()

        if not rides:
            raise _not_found()
        return rides

    async def get_ride(self, token: str) -> list[Ride]:
        ride_id = parse_ride_id(token)
        if ride_id is None:
            raise _not_found()

        try:
            rides = await self.store.find_by_id(ride_id)
        except PersistenceError:
            logger.exception("Failed to fetch ride %d", ride_id)
            raise _server_error()

        if not rides:
            raise _not_found()
        return rides
