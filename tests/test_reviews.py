# 📄 File: tests/test_reviews.py
# 🧭 Purpose (Layman Explanation):
# Checks customer reviews: moderation, replies and reports, and that the star average
# on a product follows the reviews that are approved and still visible.
# 🧪 Purpose (Technical Summary):
# Tests Review state methods, the AVG/COUNT aggregate of ReviewRepositoryImpl and the
# RatingService refresh on submit/moderate/remove.
# 🔗 Dependencies:
# - pytest
# 🔄 Connected Modules / Calls From:
# - marketplace.modules.reviews
# - marketplace.modules.catalog (rated target)

import uuid
from typing import Optional

import pytest

from marketplace.modules.catalog.domain.models import Product, ProductPricing
from marketplace.modules.catalog.infrastructure.database.catalog_repository_impl import ProductRepositoryImpl
from marketplace.modules.reviews.domain.models import (
    Review,
    ReviewServiceType,
    ReviewStatus,
    ReviewTargetType,
)
from marketplace.modules.reviews.domain.services import RatingService
from marketplace.modules.reviews.infrastructure.database.review_repository_impl import ReviewRepositoryImpl
from marketplace.shared.core.exceptions import BusinessRuleViolationError, ValidationError


def make_review(target_id: uuid.UUID, rating: int, user_id: Optional[uuid.UUID] = None, **kwargs) -> Review:
    return Review(
        user_id=user_id or uuid.uuid4(),
        target_type=ReviewTargetType.PRODUCT,
        target_id=target_id,
        service_type=ReviewServiceType.B2C,
        rating=rating,
        **kwargs
    )


@pytest.fixture
async def product(session, seller_id) -> Product:
    repo = ProductRepositoryImpl(session)
    return await repo.add(Product.create(
        seller_id=seller_id,
        category_id=uuid.uuid4(),
        name="Handloom Saree",
        pricing=ProductPricing(mrp=2400, selling_price=1999),
        stock=5,
    ))


@pytest.fixture
def rating_service(session) -> RatingService:
    return RatingService(
        ReviewRepositoryImpl(session),
        {ReviewTargetType.PRODUCT: ProductRepositoryImpl(session)},
    )


# ============================================================================
# REVIEW
# ============================================================================

class TestReview:
    def test_new_reviews_count_by_default(self):
        review = make_review(uuid.uuid4(), 4, comment="  Lovely fabric  ")
        assert review.status == ReviewStatus.APPROVED
        assert review.counts_towards_rating
        assert review.comment == "Lovely fabric"

    def test_rejected_review_takes_no_reply(self):
        review = make_review(uuid.uuid4(), 1)
        review.reject("abusive language")
        assert not review.counts_towards_rating

        with pytest.raises(BusinessRuleViolationError):
            review.add_reply("Sorry to hear that")

        review.approve()
        assert review.rejected_reason is None
        review.add_reply("  Sorry to hear that ")
        assert review.reply.message == "Sorry to hear that"

    def test_report_and_reactions(self):
        review = make_review(uuid.uuid4(), 5)
        review.like()
        review.like()
        review.dislike()
        review.report("spam link")

        assert (review.likes, review.dislikes) == (2, 1)
        assert review.is_reported
        assert review.reported_reason == "spam link"

    def test_rating_range(self):
        with pytest.raises(ValueError):
            make_review(uuid.uuid4(), 6)


# ============================================================================
# REPOSITORY
# ============================================================================

async def test_average_without_reviews(session):
    repo = ReviewRepositoryImpl(session)
    assert await repo.calculate_average_rating(ReviewTargetType.PRODUCT.value, uuid.uuid4()) == (0, 0)


async def test_average_ignores_rejected_and_deleted(session):
    repo = ReviewRepositoryImpl(session)
    target_id = uuid.uuid4()
    await repo.add(make_review(target_id, 5))
    await repo.add(make_review(target_id, 4))
    await repo.add(make_review(target_id, 1, status=ReviewStatus.REJECTED))
    deleted = await repo.add(make_review(target_id, 2))
    await repo.soft_delete(deleted.id)

    assert await repo.calculate_average_rating(ReviewTargetType.PRODUCT.value, target_id) == (4.5, 2)
    assert len(await repo.list_for_target(ReviewTargetType.PRODUCT.value, target_id)) == 2


async def test_review_lookup_and_reports(session, user_id):
    repo = ReviewRepositoryImpl(session)
    target_id = uuid.uuid4()
    review = make_review(target_id, 3, user_id=user_id)
    review.report("fake purchase")
    await repo.add(review)

    found = await repo.get_by_user_and_target(user_id, ReviewTargetType.PRODUCT.value, target_id)
    assert found.id == review.id
    assert [r.id for r in await repo.list_reported()] == [review.id]


# ============================================================================
# RATING SERVICE
# ============================================================================

async def test_submit_updates_product_rating(session, product, rating_service):
    await rating_service.submit(make_review(product.id, 5))
    await rating_service.submit(make_review(product.id, 4))

    stored = await ProductRepositoryImpl(session).get_by_id(product.id)
    assert stored.rating == 4.5
    assert stored.rating_count == 2


async def test_moderation_and_removal_refresh_rating(session, product, rating_service):
    first = await rating_service.submit(make_review(product.id, 5))
    second = await rating_service.submit(make_review(product.id, 1))

    await rating_service.moderate(second.id, approve=False, reason="off topic")
    stored = await ProductRepositoryImpl(session).get_by_id(product.id)
    assert (stored.rating, stored.rating_count) == (5, 1)

    assert await rating_service.remove(first.id)
    stored = await ProductRepositoryImpl(session).get_by_id(product.id)
    assert (stored.rating, stored.rating_count) == (0, 0)
    assert not await rating_service.remove(uuid.uuid4())


async def test_unregistered_target_type(rating_service):
    with pytest.raises(ValidationError):
        await rating_service.refresh(ReviewTargetType.HOTEL, uuid.uuid4())
