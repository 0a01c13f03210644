# 📄 File: marketplace/modules/identity/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where account records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the identity module.
#
# 🔗 Dependencies:
# - identity.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Identity Infrastructure Layer
"""
