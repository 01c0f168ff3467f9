"""
Review card extraction for Trustpilot review pages.
"""

import logging
from typing import Callable, Iterable

from bs4 import BeautifulSoup, Tag

from ..models.review import Review
from ..utils.helpers import attr_or, build_review_link, text_or

logger = logging.getLogger(__name__)

REVIEW_CARD_CLASS_PREFIX = "styles_reviewCard__"
CARD_WRAPPER_CLASS_PREFIX = "styles_cardWrapper__"

ReviewSink = Callable[[Review], None]


def is_review_card(classes: Iterable[str]) -> bool:
    """
    Check whether a block's classes mark it as a genuine review card.

    Both a review card class and a card wrapper class must be present;
    advertisements and layout containers carry only one of the two.

    Args:
        classes: Class names of the block

    Returns:
        True if the block is a review card
    """
    is_card = False
    is_wrapper = False

    for class_name in classes:
        if class_name.startswith(REVIEW_CARD_CLASS_PREFIX):
            is_card = True
        if class_name.startswith(CARD_WRAPPER_CLASS_PREFIX):
            is_wrapper = True

    return is_card and is_wrapper


def parse_review_card(card: Tag, product_url: str) -> Review:
    """
    Convert a review card into a Review.

    Missing parts of the card leave the matching field empty. Values are
    kept verbatim so the raw data stays available for later analysis.
    """
    relative_link = attr_or(card.select_one("a[data-review-title-typography]"), "href")

    return Review(
        text=text_or(card.select_one("p[data-service-review-text-typography]")),
        date=attr_or(card.find("time"), "datetime"),
        rating=attr_or(card.find("img"), "alt"),
        title=text_or(card.find("h2")),
        link=build_review_link(product_url, relative_link),
    )


def extract_reviews(document: BeautifulSoup, product_url: str, emit: ReviewSink) -> None:
    """
    Find every review card in a page and emit one Review per card.

    Reviews are pushed to ``emit`` instead of being returned so that pages
    scraped concurrently can share a single sink.

    Args:
        document: Parsed review page
        product_url: Canonical product URL used to build absolute review links
        emit: Callable receiving each extracted Review
    """
    count = 0

    for block in document.find_all("div"):
        classes = block.get("class")
        if classes is None:
            continue

        if not is_review_card(classes):
            continue

        emit(parse_review_card(block, product_url))
        count += 1

    logger.debug(f"Extracted {count} reviews for {product_url}")
