"""
Ride endpoints
==============

POST /rides      -- create a ride
GET  /rides      -- list rides, optionally paged with ``offset`` / ``limit``
GET  /rides/{id} -- get a ride by id

Failures are answered with HTTP 200 and an ``ErrorResponse`` body; see
``rides_api.api.app`` for the exception handlers.
"""

from typing import Optional, Union

from fastapi import APIRouter, Depends, Query, Request

from rides_api.api.dependencies import get_ride_service
from rides_api.api.middleware import limiter, rate_limit
from rides_api.api.schemas import ErrorResponse, RideCreateRequest, RideResponse
from rides_api.domain.entities import Ride
from rides_api.domain.validation import MAX_INTEGER
from rides_api.services.rides import RideService

router = APIRouter(prefix="/rides", tags=["rides"])

_ERROR_RESPONSES = {
    200: {
        "description": (
            "Request successfully executed. On failure the body is an "
            "error object instead of a list."
        ),
        "model": Union[list[RideResponse], ErrorResponse],
    },
}


def _to_response(rides: list[Ride]) -> list[RideResponse]:
    return [
        RideResponse(
            ride_id=r.ride_id,
            start_lat=r.start_lat,
            start_long=r.start_long,
            end_lat=r.end_lat,
            end_long=r.end_long,
            rider_name=r.rider_name,
            driver_name=r.driver_name,
            driver_vehicle=r.driver_vehicle,
            created=r.created,
        )
        for r in rides
    ]


@router.post(
    "",
    response_model=list[RideResponse],
    summary="Create a new ride",
    description=(
        "Validates the ride payload and stores it. Returns a one-element "
        "list holding the created ride, including its assigned `rideID`."
    ),
    responses=_ERROR_RESPONSES,
)
@limiter.limit(rate_limit)
async def create_ride(
    request: Request,
    body: RideCreateRequest,
    service: RideService = Depends(get_ride_service),
):
    return _to_response(await service.create_ride(body.model_dump()))


@router.get(
    "",
    response_model=list[RideResponse],
    summary="Get all rides",
    description=(
        "Rides in creation order. When `limit` is positive, at most `limit` "
        "rides starting at `offset` are returned; otherwise all rides."
    ),
    responses=_ERROR_RESPONSES,
)
@limiter.limit(rate_limit)
async def list_rides(
    request: Request,
    offset: int = Query(0, le=MAX_INTEGER, description="Number of rides to skip"),
    limit: Optional[int] = Query(
        None,
        le=MAX_INTEGER,
        description="Maximum number of rides; unset or <= 0 means no limit",
    ),
    service: RideService = Depends(get_ride_service),
):
    return _to_response(await service.list_rides(offset=offset, limit=limit))


@router.get(
    "/{ride_id}",
    response_model=list[RideResponse],
    summary="Get a ride by id",
    responses=_ERROR_RESPONSES,
)
@limiter.limit(rate_limit)
async def get_ride(
    request: Request,
    ride_id: str,
    service: RideService = Depends(get_ride_service),
):
    return _to_response(await service.get_ride(ride_id))
