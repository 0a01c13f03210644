# 📄 File: marketplace/modules/reviews/__init__.py
# 🧭 Purpose (Layman Explanation):
# Star ratings and comments, and the averages shown on whatever was reviewed.
#
# 🧪 Purpose (Technical Summary):
# Reviews bounded context: polymorphic review targets, moderation and rating aggregation into RatedModel caches.
#
# 🔗 Dependencies:
# - reviews.domain, reviews.infrastructure
#
# 🔄 Connected Modules / Calls From:
# - catalog, hospitality, cinema, providers, identity (rating targets)

"""
Reviews Module

Customer reviews and the rating caches they feed.
"""
