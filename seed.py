"""
Seed script -- populates the database with sample rides for reviewers.

Run with:
    python seed.py

Creates 8 sample rides around Metro Manila and Batangas.  Skips seeding when
the ``Rides`` table already holds data.
"""

import asyncio

from rides_api.config import settings
from rides_api.domain.entities import RideFields
from rides_api.infrastructure.database import Database
from rides_api.infrastructure.repositories import RideRepository


RIDES = [
    # (start, end, rider, driver, vehicle)
    ((13.7565, 121.0583), (14.6760, 121.0437), "Jane Doe", "John Doe", "Car"),
    ((14.5995, 120.9842), (14.5547, 121.0244), "Maria Santos", "Jose Reyes", "Sedan"),
    ((14.5547, 121.0244), (14.6507, 121.0494), "Ana Cruz", "Pedro Garcia", "SUV"),
    ((14.6760, 121.0437), (14.5995, 120.9842), "Liza Ramos", "Mark Villanueva", "Motorcycle"),
    ((14.4081, 121.0415), (14.5176, 121.0509), "Carlo Bautista", "Ramon Torres", "Van"),
    ((13.9411, 121.1631), (13.7565, 121.0583), "Grace Mendoza", "Paolo Aquino", "Sedan"),
    ((14.5176, 121.0509), (14.4081, 121.0415), "Nico Flores", "Jun dela Cruz", "Car"),
    ((14.6507, 121.0494), (14.5547, 121.0244), "Bea Castillo", "Leo Navarro", "SUV"),
]


async def seed(store: RideRepository) -> int:
    """Insert the sample rides; returns how many were created."""
    if await store.count() > 0:
        print("Database already seeded. Skipping.")
        return 0

    for (start_lat, start_long), (end_lat, end_long), rider, driver, vehicle in RIDES:
        await store.create(
            RideFields(
                start_lat=start_lat,
                start_long=start_long,
                end_lat=end_lat,
                end_long=end_long,
                rider_name=rider,
                driver_name=driver,
                driver_vehicle=vehicle,
            )
        )
    print(f"  Created {len(RIDES)} rides")
    return len(RIDES)


async def main():
    print("Seeding database...")
    database = Database(settings.database_url, echo=settings.database_echo)
    await database.connect()
    try:
        await seed(RideRepository(database))
    finally:
        await database.disconnect()
    print("\nSeed complete!")


if __name__ == "__main__":
    asyncio.run(main())
