# 📄 File: marketplace/modules/providers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Extra profile information for people who sell or offer services on the marketplace.
#
# 🧪 Purpose (Technical Summary):
# Providers bounded context: one profile table per provider role, linked one-to-one to users.
#
# 🔗 Dependencies:
# - providers.domain, providers.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - catalog, mobility, reviews

"""
Providers Module

Role-specific profiles of doctors, advocates, drivers, businesses, sellers and
home-service providers.
"""
