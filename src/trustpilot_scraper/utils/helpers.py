"""
Utility functions and classes for the Trustpilot review scraper.
"""

from typing import Dict, Optional

from bs4 import Tag
from fake_useragent import UserAgent


class UserAgentRotator:
    """
    Supplies browser user agent strings for outgoing requests.
    """

    def __init__(self):
        self.ua = UserAgent()

    def get_random_agent(self) -> str:
        """Get a random user agent string."""
        return self.ua.random


def default_headers(user_agent: str) -> Dict[str, str]:
    """Browser-like request headers sent with every page request."""
    return {
        "User-Agent": user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.5",
        "Connection": "keep-alive",
    }


def attr_or(node: Optional[Tag], name: str, default: str = "") -> str:
    """
    Read an attribute from an optional element.

    Args:
        node: Element returned by a lookup, possibly None
        name: Attribute name
        default: Value returned when the element or attribute is missing

    Returns:
        Attribute value or default
    """
    if node is None:
        return default

    value = node.get(name)
    if value is None:
        return default

    # multi-valued attributes such as class come back as lists
    if isinstance(value, list):
        return " ".join(value)

    return value


def text_or(node: Optional[Tag], default: str = "") -> str:
    """
    Read the text content of an optional element.

    Args:
        node: Element returned by a lookup, possibly None
        default: Value returned when the element is missing

    Returns:
        Element text or default
    """
    if node is None:
        return default
    return node.get_text()


def build_review_link(product_url: str, relative_link: str) -> str:
    """
    Build an absolute review permalink.

    The relative path is appended to the canonical product URL as is,
    e.g. ``https://site.test/review/acme`` + ``/reviews/123``.

    Returns:
        Absolute link, or empty string when there is no relative path
    """
    if not relative_link:
        return ""
    return product_url + relative_link
