"""FastAPI dependency injection helpers."""

from fastapi import Request

from rides_api.infrastructure.repositories import RideRepository
from rides_api.services.rides import RideService


def get_ride_store(request: Request) -> RideRepository:
    """Return the store opened by the app lifespan."""
    return request.app.state.ride_store


def get_ride_service(request: Request) -> RideService:
    return RideService(get_ride_store(request))
