"""Test configuration and fixtures."""

import asyncio

import pytest
from bs4 import BeautifulSoup

TEST_BASE_URL = "https://site.test/review"
TEST_PRODUCT = "acme"


def build_review_card(
    review_id: str,
    classes: str = "styles_cardWrapper__mLxJt styles_show__HUXRb styles_reviewCard__hcAvl",
) -> str:
    """Render a review card the way Trustpilot lays it out."""
    return f"""
    <div class="{classes}">
        <div class="styles_reviewHeader__iU9Px">
            <img alt="Rated 4 out of 5 stars" src="/stars-4.svg"/>
            <time datetime="2024-01-15T10:00:00.000Z">Jan 15, 2024</time>
        </div>
        <a href="/reviews/{review_id}" data-review-title-typography="true">
            <h2>Review {review_id}</h2>
        </a>
        <p data-service-review-text-typography="true">Body of review {review_id}</p>
    </div>
    """


def build_review_page(cards, last_page=None) -> str:
    """Render a review page holding the given cards and optional pagination."""
    pagination = ""
    if last_page is not None:
        pagination = f"""
        <nav>
            <a name="pagination-button-next" href="/review/{TEST_PRODUCT}?page=2">Next</a>
            <a name="pagination-button-last" href="/review/{TEST_PRODUCT}?page={last_page}">{last_page}</a>
        </nav>
        """

    return f"""
    <html>
        <body>
            <div>
                <div class="styles_adBanner__xk3Pq">Advertisement</div>
                {"".join(cards)}
            </div>
            {pagination}
        </body>
    </html>
    """


class FakePageFetcher:
    """Stands in for PageFetcher, serving canned HTML per page number."""

    def __init__(self, pages=None, failures=None, delay: float = 0.0, product_name=TEST_PRODUCT):
        self.product_name = product_name
        self.pages = pages or {}
        self.failures = failures or {}
        self.delay = delay
        self.requested = []
        self.completed = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        self.closed = True

    @property
    def product_url(self) -> str:
        return f"{TEST_BASE_URL}/{self.product_name}"

    async def fetch(self, page_number: int) -> BeautifulSoup:
        self.requested.append(page_number)
        await asyncio.sleep(self.delay)

        if page_number in self.failures:
            raise self.failures[page_number]

        self.completed.append(page_number)
        return BeautifulSoup(self.pages.get(page_number, "<html></html>"), "html.parser")


@pytest.fixture
def review_card():
    """Provide the review card HTML builder."""
    return build_review_card


@pytest.fixture
def review_page():
    """Provide the review page HTML builder."""
    return build_review_page


@pytest.fixture
def make_fetcher():
    """Provide a builder for fake page fetchers."""
    return FakePageFetcher


@pytest.fixture
def sample_config(tmp_path):
    """Provide sample configuration for tests."""
    return {
        "product": TEST_PRODUCT,
        "scraping": {"base_url": TEST_BASE_URL},
        "output": {"directory": str(tmp_path / "exports")},
        "logging": {"level": "DEBUG", "file": str(tmp_path / "logs" / "scraper.log")},
    }
