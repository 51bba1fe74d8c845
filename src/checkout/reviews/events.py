"""Domain events for the Review aggregate."""

from protean.fields import DateTime, Identifier, String

from checkout.domain import checkout


@checkout.event(part_of="Review")
class ReviewPosted:
    __version__ = 1

    review_id = Identifier(required=True)
    product_id = Identifier(required=True)
    author = String(required=True)
    posted_at = DateTime(required=True)


@checkout.event(part_of="Review")
class ReviewMessageEdited:
    __version__ = 1

    review_id = Identifier(required=True)
    author = String(required=True)
    edited_at = DateTime(required=True)


@checkout.event(part_of="Review")
class ReviewLiked:
    __version__ = 1

    review_id = Identifier(required=True)
    liked_by = String(required=True)
