# 📄 File: marketplace/modules/hospitality/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where hotels and restaurants records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the hospitality module.
#
# 🔗 Dependencies:
# - hospitality.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Hospitality Infrastructure Layer
"""
