# 📄 File: marketplace/modules/providers/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where provider profiles are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the providers module.
#
# 🔗 Dependencies:
# - providers.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Providers Infrastructure Layer
"""
