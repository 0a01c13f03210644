# 📄 File: marketplace/modules/commerce/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where carts, orders and deliveries records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the commerce module.
#
# 🔗 Dependencies:
# - commerce.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Commerce Infrastructure Layer
"""
