# 📄 File: marketplace/modules/reviews/domain/services/rating_service.py
# 🧭 Purpose (Layman Explanation):
# After reviews change, recalculates the star average shown on the product, hotel,
# movie or professional that was reviewed.
# 🧪 Purpose (Technical Summary):
# Domain service that aggregates approved reviews through ReviewRepository and writes
# (average, count) into the target entity's rating cache via update_rating. Target
# repositories are registered per ReviewTargetType.
# 🔗 Dependencies:
# reviews domain models and repositories, marketplace.shared.domain.repository
# 🔄 Connected Modules / Calls From:
# review moderation flows (approve/reject/delete), tests

import logging
import uuid
from typing import Mapping, Optional, Tuple

from marketplace.shared.core.exceptions import ValidationError
from marketplace.shared.domain.base import RatedModel
from marketplace.shared.domain.repository import BaseRepository

from ..models import Review, ReviewTargetType
from ..repositories import ReviewRepository

logger = logging.getLogger(__name__)


class RatingService:
    """
    Keeps rating caches in line with approved reviews.

    Example:
        service = RatingService(review_repo, {
            ReviewTargetType.PRODUCT: ProductRepositoryImpl(session),
            ReviewTargetType.HOTEL: HotelRepositoryImpl(session),
        })
        await service.refresh(ReviewTargetType.PRODUCT, product_id)
    """

    def __init__(
        self,
        review_repository: ReviewRepository,
        target_repositories: Mapping[str, BaseRepository]
    ):
        self.review_repository = review_repository
        self.target_repositories = {
            ReviewTargetType(key).value: repository for key, repository in target_repositories.items()
        }

    def _repository_for(self, target_type: str) -> BaseRepository:
        target_type = ReviewTargetType(target_type).value
        repository = self.target_repositories.get(target_type)
        if repository is None:
            raise ValidationError(
                f"No repository registered for review target '{target_type}'",
                field="target_type",
                value=target_type
            )
        return repository

    async def refresh(self, target_type: str, target_id: uuid.UUID) -> Tuple[float, int]:
        """
        Recompute a target's rating from its reviews and store it.

        Returns:
            The (average, count) written to the target

        Raises:
            ValidationError: If no repository handles the target type
            NotFoundError: If the target does not exist
        """
        repository = self._repository_for(target_type)
        average, count = await self.review_repository.calculate_average_rating(
            ReviewTargetType(target_type).value, target_id
        )

        target: RatedModel = await repository.get_or_raise(target_id)
        target.update_rating(average, count)
        await repository.save(target)

        logger.info(f"Updated {target_type} {target_id} rating to {target.rating} from {count} reviews")
        return target.rating, count

    async def submit(self, review: Review) -> Review:
        """Store a new review and refresh its target when it already counts."""
        created = await self.review_repository.add(review)
        if created.counts_towards_rating:
            await self.refresh(created.target_type, created.target_id)
        return created

    async def moderate(self, review_id: uuid.UUID, approve: bool, reason: Optional[str] = None) -> Review:
        """Approve or reject a review and refresh the target's rating."""
        review = await self.review_repository.get_or_raise(review_id)
        if approve:
            review.approve()
        else:
            review.reject(reason or "Rejected by moderator")
        saved = await self.review_repository.save(review)
        await self.refresh(saved.target_type, saved.target_id)
        return saved

    async def remove(self, review_id: uuid.UUID) -> bool:
        """Soft delete a review and refresh the target's rating."""
        review = await self.review_repository.get_by_id(review_id)
        if review is None:
            return False
        await self.review_repository.soft_delete(review_id)
        await self.refresh(review.target_type, review.target_id)
        return True
