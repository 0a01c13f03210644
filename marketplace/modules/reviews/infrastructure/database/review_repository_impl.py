# 📄 File: marketplace/modules/reviews/infrastructure/database/review_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles the database work for reviews, including adding up the stars for an average.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of ReviewRepository; the rating aggregate is a single
# AVG/COUNT query over approved, non-deleted rows.
#
# 🔗 Dependencies:
# - reviews domain repositories and models
# - marketplace.shared.infrastructure.database.repository
#
# 🔄 Connected Modules / Calls From:
# - reviews RatingService

import logging
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import func, select

from marketplace.modules.reviews.domain.models import Review, ReviewStatus
from marketplace.modules.reviews.domain.repositories import ReviewRepository
from marketplace.modules.reviews.infrastructure.database.models import ReviewModel
from marketplace.shared.infrastructure.database.repository import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class ReviewRepositoryImpl(SQLAlchemyRepository[Review, ReviewModel], ReviewRepository):

    entity_class = Review
    model_class = ReviewModel
    resource_name = "Review"

    async def calculate_average_rating(self, target_type: str, target_id: uuid.UUID) -> Tuple[float, int]:
        stmt = (
            select(func.avg(ReviewModel.rating), func.count(ReviewModel.id))
            .where(
                ReviewModel.target_type == target_type,
                ReviewModel.target_id == target_id,
                ReviewModel.status == ReviewStatus.APPROVED.value,
                ReviewModel.is_deleted.is_(False),
            )
        )
        async with self._handle_errors("aggregate"):
            result = await self._session.execute(stmt)
            average, count = result.one()

        if not count:
            return 0, 0
        logger.debug(f"Average rating for {target_type} {target_id}: {average} over {count}")
        return float(average), int(count)

    async def list_for_target(
        self,
        target_type: str,
        target_id: uuid.UUID,
        limit: int = 20,
        offset: int = 0
    ) -> List[Review]:
        stmt = (
            self._select()
            .where(
                ReviewModel.target_type == target_type,
                ReviewModel.target_id == target_id,
                ReviewModel.status == ReviewStatus.APPROVED.value,
            )
            .order_by(ReviewModel.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return await self._all(stmt)

    async def get_by_user_and_target(
        self,
        user_id: uuid.UUID,
        target_type: str,
        target_id: uuid.UUID
    ) -> Optional[Review]:
        stmt = self._select().where(
            ReviewModel.user_id == user_id,
            ReviewModel.target_type == target_type,
            ReviewModel.target_id == target_id,
        )
        return await self._first(stmt)

    async def list_reported(self, limit: int = 100) -> List[Review]:
        stmt = (
            self._select()
            .where(ReviewModel.is_reported.is_(True))
            .order_by(ReviewModel.updated_at.desc())
            .limit(limit)
        )
        return await self._all(stmt)
