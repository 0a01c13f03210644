# 📄 File: marketplace/modules/identity/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about who a marketplace user is and how they sign in.
#
# 🧪 Purpose (Technical Summary):
# Identity bounded context: domain entities, repository interfaces and SQLAlchemy persistence.
#
# 🔗 Dependencies:
# - identity.domain, identity.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - providers, commerce, finance and every module referencing users.id

"""
Identity Module

Accounts, roles, personal profiles, addresses, one-time codes and login
sessions.
"""
