# 📄 File: marketplace/modules/reviews/domain/repositories/review_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how reviews are looked up and how a star average is worked out.
# 🧪 Purpose (Technical Summary):
# Review repository interface including the rating aggregate over approved,
# non-deleted reviews.
# 🔗 Dependencies:
# abc, marketplace.shared.domain.repository, reviews domain models
# 🔄 Connected Modules / Calls From:
# reviews RatingService, reviews infrastructure

import uuid
from abc import abstractmethod
from typing import List, Optional, Tuple

from marketplace.shared.domain.repository import BaseRepository

from ..models import Review


class ReviewRepository(BaseRepository[Review]):

    @abstractmethod
    async def calculate_average_rating(self, target_type: str, target_id: uuid.UUID) -> Tuple[float, int]:
        """
        Average rating of approved, non-deleted reviews of a target.

        Returns:
            Tuple of (average, count); (0, 0) when there are none
        """
        pass

    @abstractmethod
    async def list_for_target(
        self,
        target_type: str,
        target_id: uuid.UUID,
        limit: int = 20,
        offset: int = 0
    ) -> List[Review]:
        """Approved reviews, newest first."""
        pass

    @abstractmethod
    async def get_by_user_and_target(
        self,
        user_id: uuid.UUID,
        target_type: str,
        target_id: uuid.UUID
    ) -> Optional[Review]:
        pass

    @abstractmethod
    async def list_reported(self, limit: int = 100) -> List[Review]:
        pass
