# 📄 File: marketplace/modules/finance/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation):
# The money rules that need more than one record at a time.
# 🧪 Purpose (Technical Summary):
# Exports the wallet and commission domain services.
# 🔗 Dependencies:
# wallet_service.py, commission_service.py
# 🔄 Connected Modules / Calls From:
# embedding application services, tests

from .commission_service import CommissionService
from .wallet_service import WalletService

__all__ = ["CommissionService", "WalletService"]
