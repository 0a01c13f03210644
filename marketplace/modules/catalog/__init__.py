# 📄 File: marketplace/modules/catalog/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything that can be listed for sale or booking on the marketplace.
#
# 🧪 Purpose (Technical Summary):
# Catalog bounded context: listing entities with approval, rating cache and stock handling.
#
# 🔗 Dependencies:
# - catalog.domain, catalog.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - commerce, services, reviews

"""
Catalog Module

Categories, products with variants and warehouse inventory, bookable services
and wholesale (B2B) listings.
"""
