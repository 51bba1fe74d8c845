"""Review listing for a product page.

The store query goes through ``ReviewFinder``, which takes its latency seam
explicitly: ``pause`` is called with the configured delay (capped) before
the query runs. Tests pass a recording pause; production keeps the default
delay of zero. Queries slower than the configured threshold are logged.
"""

import time
from collections.abc import Callable

import structlog
from protean.utils.globals import current_domain

from checkout.config import settings
from checkout.reviews.review import Review

logger = structlog.get_logger(__name__)


class ReviewFinder:
    def __init__(
        self,
        delay: float = 0.0,
        pause: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.delay = min(max(delay, 0.0), settings.review_delay_cap)
        self._pause = pause
        self._clock = clock

    def for_product(self, product_id, viewer_email: str | None = None) -> list[dict]:
        """Reviews of a product, each flagged ``liked`` for the viewer.

        Anonymous viewers see every review as liked, which disables liking.
        """
        started = self._clock()
        if self.delay:
            self._pause(self.delay)
        reviews = (
            current_domain.repository_for(Review)._dao.query.filter(product_id=str(product_id)).all().items
        )
        elapsed = self._clock() - started
        if elapsed > settings.slow_review_query:
            logger.warning("Slow review query", product_id=str(product_id), elapsed=round(elapsed, 3))

        return [
            {
                "id": str(review.id),
                "product_id": str(review.product_id),
                "author": review.author,
                "message": review.message,
                "likes_count": review.likes_count,
                "liked": viewer_email is None or review.is_liked_by(viewer_email),
            }
            for review in sorted(reviews, key=lambda r: r.created_at)
        ]


def reviews_for_product(product_id, viewer_email: str | None = None, finder: ReviewFinder | None = None) -> list[dict]:
    return (finder or ReviewFinder()).for_product(product_id, viewer_email)
