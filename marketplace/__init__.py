# 📄 File: marketplace/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this folder holds the marketplace data layer: every kind of record the platform
# keeps (users, orders, bookings, tickets, wallets...) and the code that saves and loads them.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the multi-vertical marketplace
# persistence layer (pydantic domain entities + async SQLAlchemy repositories).
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - Application servers embedding the data layer
# - migrations/env.py
# - tests

"""
Marketplace Data Layer

Domain entities, repositories and persistence infrastructure for a
multi-vertical marketplace: e-commerce (B2C/B2B), home services,
hospitality, ride-hailing, cinema ticketing, professional profiles,
wallets/payments and support.
"""

__version__ = "1.0.0"
__title__ = "Marketplace Data Layer"
__description__ = "Persisted data model for a multi-vertical marketplace"

__all__ = [
    "__version__",
    "__title__",
    "__description__",
]
