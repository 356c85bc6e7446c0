"""
Domain entities.

``RideFields`` is the validated, not-yet-persisted payload of a create
request.  ``Ride`` is the read model returned by the store once a row exists.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .enums import ErrorCode


class RideError(Exception):
    """A user-visible failure, rendered as an error body by the API layer."""

    def __init__(self, error_code: ErrorCode, message: str):
        super().__init__(message)
        self.error_code = error_code
        self.message = message


class PersistenceError(Exception):
    """Raised when the storage engine rejects or fails an operation."""


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class RideFields:
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Ride:
    ride_id: int
    start_lat: float
    start_long: float
    end_lat: float
    end_long: float
    rider_name: str
    driver_name: str
    driver_vehicle: str
    created: Optional[datetime] = None
