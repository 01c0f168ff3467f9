"""
Exceptions raised by the Trustpilot review scraper.
"""


class ScraperError(Exception):
    """Base class for all scraper errors."""


class FetchError(ScraperError):
    """A review page could not be retrieved or parsed."""

    def __init__(self, url: str, reason: Exception):
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class NetworkError(FetchError):
    """Transport failure or non-success HTTP status."""


class ParseError(FetchError):
    """Response body could not be decoded or parsed as HTML."""


class FatalFetchError(ScraperError):
    """
    The first review page failed, so the whole run is aborted.

    Without page 1 there is neither a page count nor any reviews to build
    on, so unlike later pages this failure is never tolerated.
    """

    def __init__(self, product_name: str, cause: FetchError):
        self.product_name = product_name
        self.cause = cause
        super().__init__(f"Cannot scrape first page for {product_name}: {cause}")
