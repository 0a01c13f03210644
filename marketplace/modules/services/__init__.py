# 📄 File: marketplace/modules/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# Appointments customers book with home-service providers.
#
# 🧪 Purpose (Technical Summary):
# Services bounded context: booking entity with schedule, pricing and cancellation.
#
# 🔗 Dependencies:
# - services.domain, services.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - finance (payments, cancellations), reviews

"""
Services Module

Home-service bookings (plumbing, cleaning, beauty and similar visits).
"""
