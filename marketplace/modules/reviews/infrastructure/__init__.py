# 📄 File: marketplace/modules/reviews/infrastructure/__init__.py
# 🧭 Purpose (Layman Explanation):
# Where reviews and ratings records are actually stored.
#
# 🧪 Purpose (Technical Summary):
# Infrastructure layer of the reviews module.
#
# 🔗 Dependencies:
# - reviews.infrastructure.database
#
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.load_all_models

"""
Reviews Infrastructure Layer
"""
