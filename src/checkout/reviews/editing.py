"""EditReviewMessage — replace the message of exactly one review.

The review is addressed by its identifier only, so an edit can never touch
more than one document. The handler reports the author of the review it
changed, which lets callers spot edits made on someone else's review.
"""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from checkout.domain import checkout
from checkout.reviews.review import Review


@checkout.command(part_of="Review")
class EditReviewMessage:
    review_id = Identifier(required=True)
    message = Text(required=True)


@checkout.command_handler(part_of=Review)
class EditReviewMessageHandler:
    @handle(EditReviewMessage)
    def edit_review_message(self, command):
        repo = current_domain.repository_for(Review)
        review = repo.get(command.review_id)
        review.edit_message(command.message)
        repo.add(review)
        return {"modified": 1, "original_author": review.author}
