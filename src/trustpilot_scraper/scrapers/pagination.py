"""
Page count discovery from the pagination controls of a review page.
"""

import logging
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup

from ..utils.helpers import attr_or

logger = logging.getLogger(__name__)

LAST_PAGE_SELECTOR = "a[name='pagination-button-last']"
PAGE_QUERY_PARAM = "page"
SINGLE_PAGE = 1


def discover_page_count(document: BeautifulSoup) -> int:
    """
    Read the total number of review pages from the "last page" link.

    Products with a single page of reviews have no such link, so a missing
    or malformed link means one page rather than an error.

    Args:
        document: Parsed first review page

    Returns:
        Number of review pages, at least 1
    """
    href = attr_or(document.select_one(LAST_PAGE_SELECTOR), "href")
    if not href:
        logger.debug("No last page link found, assuming a single page")
        return SINGLE_PAGE

    values = parse_qs(urlparse(href).query).get(PAGE_QUERY_PARAM)
    if not values:
        logger.warning(f"Last page link has no {PAGE_QUERY_PARAM} parameter: {href}")
        return SINGLE_PAGE

    try:
        last_page = int(values[0])
    except ValueError as e:
        logger.warning(f"Cannot parse last page {values[0]}: {e}")
        return SINGLE_PAGE

    if last_page < SINGLE_PAGE:
        logger.warning(f"Ignoring invalid last page {last_page}")
        return SINGLE_PAGE

    return last_page
