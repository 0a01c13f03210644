# 📄 File: marketplace/modules/finance/__init__.py
# 🧭 Purpose (Layman Explanation):
# Everything about money: payments, refunds, wallets, the platform's cut, invoices and subscription plans.
#
# 🧪 Purpose (Technical Summary):
# Finance bounded context: gateway payments, wallet ledger, commission resolution, GST invoices and subscriptions.
#
# 🔗 Dependencies:
# - finance.domain, finance.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - commerce, services, hospitality, mobility, cinema, providers

"""
Finance Module

Payments, refunds, wallets and their ledger, commissions, cancellations,
invoices and provider subscriptions.
"""
