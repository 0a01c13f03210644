# 📄 File: marketplace/modules/support/__init__.py
# 🧭 Purpose (Layman Explanation):
# The platform's back office: who did what, messages to users, help-desk tickets, uploaded files and settings.
#
# 🧪 Purpose (Technical Summary):
# Support bounded context: append-only audit logs, notifications, support tickets, documents with verification and key/value settings.
#
# 🔗 Dependencies:
# - support.domain, support.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - every module (audit trail), providers (documents), admin tooling

"""
Support Module

Audit trails, admin activity, notifications, help-desk tickets, uploaded
documents and runtime settings.
"""
