"""
Data models for the Trustpilot review scraper.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Review:
    """
    One customer review extracted from a review card.

    Every field is a best-effort extraction taken verbatim from the markup.
    A field the card does not carry is an empty string, never an error.
    """

    text: str = ""
    date: str = ""
    rating: str = ""
    title: str = ""
    link: str = ""

    def to_dict(self) -> dict:
        """Convert the review to a dictionary."""
        return {
            "text": self.text,
            "date": self.date,
            "rating": self.rating,
            "title": self.title,
            "link": self.link,
        }


@dataclass(frozen=True)
class ProductReviewSet:
    """
    All reviews collected for one product during a single run.

    Review order follows no particular page order since remaining pages
    are scraped concurrently.
    """

    product_name: str
    reviews: Tuple[Review, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.reviews)

    def to_dict(self) -> dict:
        """Convert the review set to the output record."""
        return {
            "product_name": self.product_name,
            "reviews": [review.to_dict() for review in self.reviews],
        }
