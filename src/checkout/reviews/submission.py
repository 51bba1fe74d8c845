"""Review submission and likes — commands and handler."""

from protean import handle
from protean.fields import Identifier, String, Text
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.reviews.review import Review


@checkout.command(part_of="Review")
class PostReview:
    product_id = Identifier(required=True)
    author = String(required=True, max_length=254)
    message = Text(required=True)


@checkout.command(part_of="Review")
class LikeReview:
    review_id = Identifier(required=True)
    email = String(required=True, max_length=254)


@checkout.command_handler(part_of=Review)
class ReviewSubmissionHandler:
    @handle(PostReview)
    def post_review(self, command):
        review = Review.post(
            product_id=command.product_id,
            author=command.author,
            message=command.message,
        )
        current_domain.repository_for(Review).add(review)
        return str(review.id)

    @handle(LikeReview)
    def like_review(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        review.like(command.email)
        repo.add(review)
        return review.likes_count
