# 📄 File: marketplace/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Holds the settings that tell the marketplace which database to use and how to behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package exporting the pydantic-settings Settings class and its cached accessor.
#
# 🔗 Dependencies:
# - settings.py (application settings)
#
# 🔄 Connected Modules / Calls From:
# - Database infrastructure, logging, security, finance services

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
