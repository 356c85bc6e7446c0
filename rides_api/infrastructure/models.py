"""
SQLAlchemy ORM models.

Tables
------
* ``Rides`` -- one row per recorded ride

Column names keep the camelCase spelling of the public JSON fields.
``sqlite_autoincrement`` guarantees that a ``rideID`` is never handed out
twice, even after rows are deleted.
"""

from sqlalchemy import Column, DateTime, Float, Integer, Text, func

from .database import Base


class RideModel(Base):
    __tablename__ = "Rides"

    ride_id = Column("rideID", Integer, primary_key=True, autoincrement=True)

    start_lat = Column("startLat", Float, nullable=False)
    start_long = Column("startLong", Float, nullable=False)
    end_lat = Column("endLat", Float, nullable=False)
    end_long = Column("endLong", Float, nullable=False)

    rider_name = Column("riderName", Text, nullable=False)
    driver_name = Column("driverName", Text, nullable=False)
    driver_vehicle = Column("driverVehicle", Text, nullable=False)

    created = Column("created", DateTime, server_default=func.current_timestamp())

    __table_args__ = {"sqlite_autoincrement": True}
