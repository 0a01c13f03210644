# 📄 File: marketplace/modules/mobility/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the storage contracts for vehicles and rides.
# 🧪 Purpose (Technical Summary):
# Exports mobility repository interfaces.
# 🔗 Dependencies:
# mobility_repository.py
# 🔄 Connected Modules / Calls From:
# mobility infrastructure

from .mobility_repository import RideRepository, VehicleRepository

__all__ = ["RideRepository", "VehicleRepository"]
