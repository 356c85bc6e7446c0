"""Pydantic request / response schemas for the REST API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from rides_api.domain.enums import ErrorCode


# ── Requests ──────────────────────────────────────────────────────────


class RideCreateRequest(BaseModel):
    """Raw create payload.

    Fields are untyped: clients may send coordinates as text.  The ride
    service coerces and validates them in a fixed order; the first failing
    rule decides the error message.
    """

    start_lat: Any = Field(None, description="The start latitude", examples=[13.7565])
    start_long: Any = Field(None, description="The start longitude", examples=[121.0583])
    end_lat: Any = Field(None, description="The end latitude", examples=[14.6760])
    end_long: Any = Field(None, description="The end longitude", examples=[121.0437])
    rider_name: Any = Field(None, description="The name of the rider", examples=["Jane Doe"])
    driver_name: Any = Field(None, description="The name of the driver", examples=["John Doe"])
    driver_vehicle: Any = Field(None, description="The driver's vehicle", examples=["Car"])


# ── Responses ─────────────────────────────────────────────────────────


class RideResponse(BaseModel):
    ride_id: int = Field(alias="rideID")
    start_lat: float = Field(alias="startLat")
    start_long: float = Field(alias="startLong")
    end_lat: float = Field(alias="endLat")
    end_long: float = Field(alias="endLong")
    rider_name: str = Field(alias="riderName")
    driver_name: str = Field(alias="driverName")
    driver_vehicle: str = Field(alias="driverVehicle")
    created: Optional[datetime] = None

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    error_code: ErrorCode
    message: str
