"""Scrapers package for Trustpilot scraper."""

from .extractor import extract_reviews, is_review_card
from .fetcher import PageFetcher
from .pagination import discover_page_count

__all__ = ["PageFetcher", "extract_reviews", "is_review_card", "discover_page_count"]
