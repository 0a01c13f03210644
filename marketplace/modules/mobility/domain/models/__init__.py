# 📄 File: marketplace/modules/mobility/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# One place to import vehicle and ride record types from.
# 🧪 Purpose (Technical Summary):
# Re-exports mobility domain entities, value objects and enums.
# 🔗 Dependencies:
# vehicle.py, ride.py
# 🔄 Connected Modules / Calls From:
# mobility repositories, finance, reviews

from .ride import (
    Fare,
    Ride,
    RideActor,
    RideCancellation,
    RideFeedback,
    RideLocation,
    RideRatings,
    RideSource,
    RideStatus,
)
from .vehicle import FuelType, Vehicle, VehicleCategory, VehicleDocument, VehicleStats, VehicleType

__all__ = [
    "Fare",
    "FuelType",
    "Ride",
    "RideActor",
    "RideCancellation",
    "RideFeedback",
    "RideLocation",
    "RideRatings",
    "RideSource",
    "RideStatus",
    "Vehicle",
    "VehicleCategory",
    "VehicleDocument",
    "VehicleStats",
    "VehicleType",
]
