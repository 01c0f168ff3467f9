"""
Trustpilot Review Scraper

Collects every customer review of a product listed on Trustpilot and
exports them as a single JSON record.
"""

__version__ = "1.0.0"

from .errors import FatalFetchError, FetchError, NetworkError, ParseError, ScraperError
from .models.review import ProductReviewSet, Review
from .orchestration.orchestrator import ReviewScrapingOrchestrator

__all__ = [
    "Review",
    "ProductReviewSet",
    "ReviewScrapingOrchestrator",
    "ScraperError",
    "FetchError",
    "NetworkError",
    "ParseError",
    "FatalFetchError",
]
