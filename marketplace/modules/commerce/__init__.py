# 📄 File: marketplace/modules/commerce/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything that happens when a customer buys products: cart, coupon, order and delivery.
#
# 🧪 Purpose (Technical Summary):
# Commerce bounded context: snapshot-priced orders with a totals invariant and shipment tracking.
#
# 🔗 Dependencies:
# - commerce.domain, commerce.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - finance (payments, invoices, commissions), reviews

"""
Commerce Module

Carts, coupons, orders with per-seller order items, and shipments.
"""
