# 📄 File: marketplace/modules/finance/domain/services/commission_service.py
# 🧭 Purpose (Layman Explanation):
# Decides what percentage the platform keeps from a sale and records that cut.
# 🧪 Purpose (Technical Summary):
# Resolves the commission percentage with precedence: active subscription override,
# then the CommissionRule for the module and the user's plan, then the configured
# default. Records a Commission with the resolved percentage and its source.
# 🔗 Dependencies:
# finance domain models and repositories, marketplace.shared.config.settings
# 🔄 Connected Modules / Calls From:
# commerce order items, services/hospitality/mobility/cinema booking completion

import logging
import uuid
from typing import Dict, Optional, Tuple

from marketplace.shared.config.settings import get_settings

from ..models import (
    Commission,
    CommissionModule,
    CommissionSource,
    PlanCode,
    ReferenceType,
    ServiceType,
)
from ..repositories import CommissionRepository, CommissionRuleRepository, SubscriptionRepository

logger = logging.getLogger(__name__)

# Service types that have per-plan commission rules
RULE_MODULES: Dict[str, CommissionModule] = {
    ServiceType.B2C.value: CommissionModule.B2C,
    ServiceType.B2B.value: CommissionModule.B2B,
    ServiceType.SERVICE.value: CommissionModule.HOME_SERVICE,
}


class CommissionService:
    """Domain service for commission resolution and recording."""

    def __init__(
        self,
        rule_repository: CommissionRuleRepository,
        commission_repository: CommissionRepository,
        subscription_repository: SubscriptionRepository
    ):
        self.rule_repository = rule_repository
        self.commission_repository = commission_repository
        self.subscription_repository = subscription_repository

    async def resolve_percentage(
        self,
        user_id: uuid.UUID,
        service_type: ServiceType
    ) -> Tuple[float, CommissionSource]:
        """
        Work out the commission percentage for a provider.

        Args:
            user_id: Provider (seller, venue owner, professional) earning the money
            service_type: Business line of the transaction

        Returns:
            Tuple of (percentage, where it came from)
        """
        service_type = ServiceType(service_type)

        # 1. Subscription override
        subscription = await self.subscription_repository.get_active_for_user(user_id)
        if subscription and subscription.commission_percentage is not None:
            return subscription.commission_percentage, CommissionSource.SUBSCRIPTION

        # 2. Rule for the module and the user's plan
        module = RULE_MODULES.get(service_type.value)
        if module is not None:
            plan = subscription.plan_code if subscription else PlanCode.FREE.value
            rule = await self.rule_repository.get_for(module.value, plan)
            if rule:
                return rule.percentage, CommissionSource.RULE

        # 3. Configured default
        return get_settings().DEFAULT_COMMISSION_PERCENTAGE, CommissionSource.DEFAULT

    async def record(
        self,
        user_id: uuid.UUID,
        service_type: ServiceType,
        gross_amount: float,
        reference_type: Optional[ReferenceType] = None,
        reference_id: Optional[uuid.UUID] = None,
        payment_id: Optional[uuid.UUID] = None,
        percentage: Optional[float] = None
    ) -> Commission:
        """
        Calculate and store the commission on a transaction.

        An explicit percentage is recorded as a manual commission and skips resolution.
        """
        if percentage is None:
            percentage, source = await self.resolve_percentage(user_id, service_type)
        else:
            source = CommissionSource.MANUAL

        commission = Commission.calculate(
            user_id=user_id,
            service_type=service_type,
            gross_amount=gross_amount,
            commission_percentage=percentage,
            source=source,
            reference_type=reference_type,
            reference_id=reference_id,
            payment_id=payment_id,
        )
        created = await self.commission_repository.add(commission)
        logger.info(
            f"Recorded commission {created.commission_amount} ({percentage}% from {source.value}) "
            f"on {gross_amount} for user {user_id}"
        )
        return created

    async def reverse(self, commission_id: uuid.UUID, reason: str) -> Commission:
        commission = await self.commission_repository.get_or_raise(commission_id)
        commission.reverse(reason)
        logger.info(f"Reversed commission {commission_id}: {reason}")
        return await self.commission_repository.save(commission)
