"""Utils package for Trustpilot scraper."""

from .helpers import UserAgentRotator, attr_or, build_review_link, default_headers, text_or

__all__ = ["UserAgentRotator", "default_headers", "attr_or", "text_or", "build_review_link"]
