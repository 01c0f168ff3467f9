"""
Page fetching for Trustpilot product review pages.
"""

import asyncio
import logging
from typing import Dict, Optional

import aiohttp
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..errors import NetworkError, ParseError
from ..utils.helpers import UserAgentRotator, default_headers

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.trustpilot.com/review"


class PageFetcher:
    """
    Retrieves and parses the review pages of a single product.

    One HTTP session is shared by every page request of a run. Requests are
    made once, without retries, using the transport's default timeout.
    """

    def __init__(
        self,
        product_name: str,
        base_url: str = DEFAULT_BASE_URL,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize the page fetcher.

        Args:
            product_name: Product identifier as used in review page URLs
            base_url: Review site URL prefix, without trailing slash
            headers: Request headers; browser-like defaults when omitted
        """
        self.product_name = product_name
        self.base_url = base_url.rstrip("/")
        self.headers = headers
        self.session: Optional[aiohttp.ClientSession] = None

    async def __aenter__(self):
        """Async context manager entry."""
        headers = self.headers
        if headers is None:
            headers = default_headers(UserAgentRotator().get_random_agent())

        self.session = aiohttp.ClientSession(headers=headers)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.session:
            await self.session.close()
            self.session = None

    @property
    def product_url(self) -> str:
        """Canonical product review URL, free of query parameters."""
        return f"{self.base_url}/{self.product_name}"

    def page_url(self, page_number: int) -> str:
        """
        Build the request URL for a review page.

        Args:
            page_number: 1-based page number

        Returns:
            Canonical URL for the first page, paginated URL otherwise
        """
        if page_number <= 1:
            return self.product_url
        return f"{self.product_url}?page={page_number}"

    async def fetch(self, page_number: int) -> BeautifulSoup:
        """
        Fetch and parse one review page.

        Args:
            page_number: 1-based page number

        Returns:
            Parsed page document

        Raises:
            NetworkError: Connection failure, timeout or non-success status
            ParseError: Body could not be decoded or parsed
        """
        if self.session is None:
            raise RuntimeError("PageFetcher must be used as an async context manager")

        logger.info(f"Start scraping page {page_number} for {self.product_name}")

        url = self.page_url(page_number)

        try:
            async with self.session.get(url) as response:
                response.raise_for_status()
                html_content = await response.text()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(url, e) from e
        except UnicodeDecodeError as e:
            raise ParseError(url, e) from e

        return await asyncio.to_thread(self.parse, url, html_content)

    @staticmethod
    def parse(url: str, html_content: str) -> BeautifulSoup:
        """
        Parse page markup into a document tree.

        Raises:
            ParseError: The parser rejected the markup
        """
        try:
            return BeautifulSoup(html_content, "html.parser")
        except (ParserRejectedMarkup, TypeError) as e:
            raise ParseError(url, e) from e
