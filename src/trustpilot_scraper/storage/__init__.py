"""Storage package for Trustpilot scraper."""

from .writer import export_to_json

__all__ = ["export_to_json"]
