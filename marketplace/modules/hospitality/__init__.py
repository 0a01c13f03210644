# 📄 File: marketplace/modules/hospitality/__init__.py
# 🧭 Purpose (Layman Explanation):
# Hotels, rooms, restaurants and the reservations guests make at them.
#
# 🧪 Purpose (Technical Summary):
# Hospitality bounded context: venue listings, room inventory, stays, dining tables, menu items and table bookings.
#
# 🔗 Dependencies:
# - hospitality.domain, hospitality.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - finance (payments, commissions, invoices), reviews

"""
Hospitality Module

Hotels with rooms and stays; restaurants with tables, menus and table reservations.
"""
