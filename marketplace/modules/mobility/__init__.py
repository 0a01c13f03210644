# 📄 File: marketplace/modules/mobility/__init__.py
# 🧭 Purpose (Layman Explanation):
# Vehicles drivers register and the rides customers take in them.
#
# 🧪 Purpose (Technical Summary):
# Mobility bounded context: vehicle registry with verification and ride lifecycle with fare snapshots.
#
# 🔗 Dependencies:
# - mobility.domain, mobility.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - providers (driver profiles), finance (payments, commissions), reviews

"""
Mobility Module

Driver vehicles and ride-hailing trips.
"""
