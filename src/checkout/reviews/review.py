"""Review aggregate — free-text product reviews kept in the document store.

Reviews sit beside checkout as a collaborator: they share the ``documents``
provider with placed orders but take no part in placement.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, String, Text

from checkout.domain import checkout
from checkout.reviews.events import ReviewLiked, ReviewMessageEdited, ReviewPosted


@checkout.aggregate(provider="documents")
class Review:
    product_id = Identifier(required=True)
    author = String(required=True, max_length=254)  # author's email
    message = Text(required=True)
    liked_by = Text()  # JSON array of emails
    likes_count = Integer(default=0)
    created_at = DateTime()
    edited_at = DateTime()

    @classmethod
    def post(cls, product_id, author, message):
        now = datetime.now(UTC)
        review = cls(
            product_id=product_id,
            author=author,
            message=message,
            liked_by=json.dumps([]),
            likes_count=0,
            created_at=now,
        )
        review.raise_(
            ReviewPosted(
                review_id=str(review.id),
                product_id=str(product_id),
                author=author,
                posted_at=now,
            )
        )
        return review

    def likers(self):
        return json.loads(self.liked_by) if self.liked_by else []

    def is_liked_by(self, email):
        return email in self.likers()

    def edit_message(self, message):
        if not message or not message.strip():
            raise ValidationError({"message": ["Review message cannot be blank"]})

        now = datetime.now(UTC)
        self.message = message
        self.edited_at = now

        self.raise_(ReviewMessageEdited(review_id=str(self.id), author=self.author, edited_at=now))

    def like(self, email):
        likers = self.likers()
        if email in likers:
            raise ValidationError({"liked_by": ["Review already liked by this customer"]})

        likers.append(email)
        self.liked_by = json.dumps(likers)
        self.likes_count = len(likers)

        self.raise_(ReviewLiked(review_id=str(self.id), liked_by=email))
