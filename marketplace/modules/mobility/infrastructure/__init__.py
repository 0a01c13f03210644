# 📄 File: marketplace/modules/mobility/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where vehicles and rides records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the mobility module.
#
# 🔗 Dependencies:
# - mobility.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Mobility Infrastructure Layer
"""
