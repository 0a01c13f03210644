# 📄 File: marketplace/modules/cinema/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where cinemas, shows and tickets records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the cinema module.
#
# 🔗 Dependencies:
# - cinema.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Cinema Infrastructure Layer
"""
