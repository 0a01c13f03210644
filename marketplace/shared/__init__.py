# 📄 File: marketplace/shared/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Marks the 'shared' folder as the toolbox every marketplace module uses: settings, errors,
# database plumbing, logging and small helpers.
#
# 🧪 Purpose (Technical Summary):
# Shared kernel package initialization for configuration, exception hierarchy,
# base domain classes, database infrastructure and utilities.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - All marketplace modules

"""
Shared Kernel - Common Utilities and Infrastructure

- Configuration management
- Exception hierarchy
- Base domain entities and value objects
- Database engine, sessions and the generic repository
- Logging, validators and helpers
"""

__all__ = []
