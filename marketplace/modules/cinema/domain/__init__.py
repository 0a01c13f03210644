# 📄 File: marketplace/modules/cinema/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The rules for cinemas, shows and tickets.
#
# 🧪 Purpose (Technical Summary):
# Domain layer of the cinema module: pydantic models and abstract repositories.
#
# 🔗 Dependencies:
# - pydantic, marketplace.shared.domain
#
# 🔄 Connected Modules / Calls From:
# - cinema.infrastructure.database

"""
Cinema Domain Layer
"""
