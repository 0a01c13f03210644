# 📄 File: marketplace/modules/support/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where audit logs, notifications, tickets, documents and settings records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the support module.
#
# 🔗 Dependencies:
# - support.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Support Infrastructure Layer
"""
