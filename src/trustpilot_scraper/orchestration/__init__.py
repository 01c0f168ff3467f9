"""Orchestration package for Trustpilot scraper."""

from .collector import ParallelCollector
from .orchestrator import ReviewScrapingOrchestrator

__all__ = ["ParallelCollector", "ReviewScrapingOrchestrator"]
