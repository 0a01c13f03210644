# 📄 File: marketplace/modules/finance/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where payments, wallets and subscriptions records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the finance module.
#
# 🔗 Dependencies:
# - finance.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Finance Infrastructure Layer
"""
