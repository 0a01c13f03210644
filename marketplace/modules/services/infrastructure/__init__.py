# 📄 File: marketplace/modules/services/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where home-service bookings records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the services module.
#
# 🔗 Dependencies:
# - services.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Services Infrastructure Layer
"""
