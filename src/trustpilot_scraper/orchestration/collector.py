"""
Concurrent collection of reviews from the remaining pages of a product.
"""

import asyncio
import logging
from typing import List

from ..errors import FetchError
from ..models.review import Review
from ..scrapers.extractor import extract_reviews

logger = logging.getLogger(__name__)

_CLOSED = object()


class ParallelCollector:
    """
    Scrapes review pages 2..N concurrently and merges their reviews.

    Every page runs in its own task and pushes reviews into one unbounded
    queue. A single drain task moves them into the result list while the
    page tasks are still running. A page that cannot be fetched is logged
    and skipped; it never stops the other pages.
    """

    def __init__(self, fetcher):
        """
        Initialize the collector.

        Args:
            fetcher: Open PageFetcher (or compatible) for the product
        """
        self.fetcher = fetcher
        self.failed_pages: List[int] = []

    async def collect(self, last_page: int) -> List[Review]:
        """
        Scrape pages 2..last_page and return all their reviews.

        Returns only after every page task has finished and the queue has
        been drained completely.

        Args:
            last_page: Total number of review pages

        Returns:
            Reviews from every page that was fetched successfully, in no
            particular order
        """
        self.failed_pages = []
        reviews: List[Review] = []
        sink: asyncio.Queue = asyncio.Queue()

        consumer = asyncio.create_task(self._drain(sink, reviews))
        producers = [
            asyncio.create_task(self._scrape_page(page_number, sink))
            for page_number in range(2, last_page + 1)
        ]

        try:
            results = await asyncio.gather(*producers, return_exceptions=True)
        finally:
            sink.put_nowait(_CLOSED)
            await consumer

        for page_number, result in zip(range(2, last_page + 1), results):
            if isinstance(result, BaseException):
                logger.error(f"Unexpected error on page {page_number}: {result}")
                raise result

        logger.info(
            f"Collected {len(reviews)} reviews from pages 2-{last_page} "
            f"({len(self.failed_pages)} failed)"
        )
        return reviews

    async def _scrape_page(self, page_number: int, sink: asyncio.Queue) -> None:
        """Fetch one page and push its reviews into the sink."""
        try:
            document = await self.fetcher.fetch(page_number)
        except FetchError as e:
            logger.warning(f"Cannot get page {page_number} product reviews: {e}")
            self.failed_pages.append(page_number)
            return

        extract_reviews(document, self.fetcher.product_url, sink.put_nowait)

    @staticmethod
    async def _drain(sink: asyncio.Queue, reviews: List[Review]) -> None:
        """Move reviews from the sink into the result list until it is closed."""
        while True:
            item = await sink.get()
            if item is _CLOSED:
                return
            reviews.append(item)
