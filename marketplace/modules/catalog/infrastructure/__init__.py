# 📄 File: marketplace/modules/catalog/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where catalog entries are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the catalog module.
#
# 🔗 Dependencies:
# - catalog.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Catalog Infrastructure Layer
"""
