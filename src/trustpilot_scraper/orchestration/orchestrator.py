"""
Main orchestrator for the Trustpilot review scraping system.
"""

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..errors import FatalFetchError, FetchError
from ..models.review import ProductReviewSet, Review
from ..scrapers.extractor import extract_reviews
from ..scrapers.fetcher import DEFAULT_BASE_URL, PageFetcher
from ..scrapers.pagination import discover_page_count
from ..storage.writer import export_to_json
from .collector import ParallelCollector

logger = logging.getLogger(__name__)


class ReviewScrapingOrchestrator:
    """
    Drives a complete scraping run for one product.

    Fetches the first page, discovers how many pages exist, collects the
    remaining pages concurrently and hands the merged result to the JSON
    writer.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None, fetcher_factory=PageFetcher):
        """
        Initialize the orchestrator.

        Args:
            config: Configuration dictionary, merged over the defaults
            fetcher_factory: Callable building a page fetcher from a product
                name and base URL
        """
        self.config = merge_config(self._get_default_config(), config or {})
        self.fetcher_factory = fetcher_factory

        logger.info("Review scraping orchestrator initialized")

    @staticmethod
    def _get_default_config() -> Dict[str, Any]:
        """Get default configuration settings."""
        return {
            "product": "invideo.io",
            "scraping": {"base_url": DEFAULT_BASE_URL},
            "output": {
                "directory": "exports",
                "filename_template": "trustpilot_reviews_{product}.json",
            },
            "logging": {"level": "INFO", "file": "logs/scraper.log"},
        }

    async def scrape_product(self, product_name: str) -> ProductReviewSet:
        """
        Scrape every review page of a product.

        Failures on pages after the first only reduce the result. A failure
        on the first page aborts the run.

        Args:
            product_name: Product identifier as used in review page URLs

        Returns:
            ProductReviewSet with the reviews of all fetched pages

        Raises:
            FatalFetchError: The first page could not be fetched or parsed
        """
        start_time = time.time()
        base_url = self.config["scraping"]["base_url"]

        async with self.fetcher_factory(product_name, base_url=base_url) as fetcher:
            try:
                document = await fetcher.fetch(1)
            except FetchError as e:
                logger.error(f"Cannot scrape first page for {product_name}: {e}")
                raise FatalFetchError(product_name, e) from e

            reviews: List[Review] = []
            extract_reviews(document, fetcher.product_url, reviews.append)

            last_page = discover_page_count(document)
            logger.info(f"Found {last_page} review pages for {product_name}")

            if last_page > 1:
                collector = ParallelCollector(fetcher)
                reviews.extend(await collector.collect(last_page))

                if collector.failed_pages:
                    logger.warning(
                        f"Skipped {len(collector.failed_pages)} pages for {product_name}: "
                        f"{sorted(collector.failed_pages)}"
                    )

        logger.info(
            f"Scraped {len(reviews)} reviews for {product_name} "
            f"in {time.time() - start_time:.2f}s"
        )

        return ProductReviewSet(product_name=product_name, reviews=tuple(reviews))

    def output_path(self, product_name: str) -> Path:
        """Default export file for a product."""
        output_config = self.config["output"]
        filename = output_config["filename_template"].format(product=product_name)
        return Path(output_config["directory"]) / filename

    async def run(
        self, product_name: Optional[str] = None, output_file: Optional[str] = None
    ) -> Path:
        """
        Scrape a product and export its reviews to JSON.

        Args:
            product_name: Product to scrape; the configured product when omitted
            output_file: Export path; derived from the output config when omitted

        Returns:
            Path of the written file

        Raises:
            FatalFetchError: The first page failed; nothing is written
        """
        product_name = product_name or self.config["product"]
        logger.info(f"Start scraping reviews for {product_name}")

        review_set = await self.scrape_product(product_name)

        path = Path(output_file) if output_file else self.output_path(product_name)
        export_to_json(review_set, path)

        logger.info(f"Successfully scraped {len(review_set)} reviews for {product_name}")
        return path


def merge_config(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge configuration overrides into defaults."""
    merged = dict(defaults)

    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = value

    return merged
