"""
Repository Pattern -- abstracts DB access so the ride service stays DB-agnostic.

``RideRepository`` is the ride store.  Every operation runs in its own short
session / transaction; callers never see a session.  Engine failures are
re-raised as :class:`PersistenceError`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .database import Database
from .models import RideModel
from rides_api.domain.entities import PersistenceError, Ride, RideFields


def _to_entity(row: RideModel) -> Ride:
    return Ride(
        ride_id=row.ride_id,
        start_lat=row.start_lat,
        start_long=row.start_long,
        end_lat=row.end_lat,
        end_long=row.end_long,
        rider_name=row.rider_name,
        driver_name=row.driver_name,
        driver_vehicle=row.driver_vehicle,
        created=row.created,
    )


class RideRepository:
    def __init__(self, database: Database):
        self.database = database

    @asynccontextmanager
    async def _transaction(self, action: str) -> AsyncIterator[AsyncSession]:
        try:
            async with self.database.session() as session:
                async with session.begin():
                    yield session
        except SQLAlchemyError as exc:
            raise PersistenceError(f"Could not {action}") from exc

    async def create(self, fields: RideFields) -> int:
        """Insert one ride and return its assigned ``rideID``."""
        ride = RideModel(
            start_lat=fields.start_lat,
            start_long=fields.start_long,
            end_lat=fields.end_lat,
            end_long=fields.end_long,
            rider_name=fields.rider_name,
            driver_name=fields.driver_name,
            driver_vehicle=fields.driver_vehicle,
        )
        async with self._transaction("insert ride") as session:
            session.add(ride)
            await session.flush()
            ride_id = ride.ride_id
        return ride_id

    async def find_by_id(self, ride_id: int) -> list[Ride]:
        async with self._transaction("fetch ride") as session:
            result = await session.execute(
                select(RideModel).where(RideModel.ride_id == ride_id)
            )
            return [_to_entity(row) for row in result.scalars().all()]

    async def find_all(
        self, offset: int = 0, limit: Optional[int] = None
    ) -> list[Ride]:
        """Rides in ascending ``rideID`` order; no ``LIMIT`` when *limit* is None."""
        query = select(RideModel).order_by(RideModel.ride_id)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        async with self._transaction("fetch rides") as session:
            result = await session.execute(query)
            return [_to_entity(row) for row in result.scalars().all()]

    async def count(self) -> int:
        async with self._transaction("count rides") as session:
            result = await session.execute(
                select(func.count()).select_from(RideModel)
            )
            return result.scalar() or 0

    async def delete_all(self) -> int:
        """Administrative reset; returns the number of deleted rows."""
        async with self._transaction("delete rides") as session:
            result = await session.execute(delete(RideModel))
            return result.rowcount or 0
