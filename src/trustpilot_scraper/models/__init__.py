"""Models package for Trustpilot scraper."""

from .review import ProductReviewSet, Review

__all__ = ["Review", "ProductReviewSet"]
