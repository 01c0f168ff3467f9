#!/usr/bin/env python3
"""
Trustpilot Review Scraper - Main Entry Point

Collects every review of a Trustpilot product and exports them to JSON.
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# Add src directory to Python path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from trustpilot_scraper import FatalFetchError, ReviewScrapingOrchestrator

logger = logging.getLogger(__name__)


def setup_logging(config: Dict[str, Any], verbose: bool = False):
    """Configure console and file logging."""
    logging_config = config.get("logging", {})
    log_file = Path(logging_config.get("file", "logs/scraper.log"))
    log_file.parent.mkdir(parents=True, exist_ok=True)

    level = logging.DEBUG if verbose else logging_config.get("level", "INFO")

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file), logging.StreamHandler()],
    )


def load_config(config_path: str = "config/config.json") -> Dict[str, Any]:
    """Load configuration from file."""
    config_file = Path(config_path)

    if config_file.exists():
        with open(config_file, "r") as f:
            return json.load(f)
    else:
        logger.warning(f"Config file {config_path} not found, using defaults")
        return {}


async def run_scraper(
    config: Dict[str, Any], product: Optional[str] = None, output: Optional[str] = None
) -> Path:
    """Run the scraper for one product."""
    orchestrator = ReviewScrapingOrchestrator(config)
    return await orchestrator.run(product, output)


def create_sample_config():
    """Create a sample configuration file."""
    sample_config = ReviewScrapingOrchestrator._get_default_config()

    config_dir = Path("config")
    config_dir.mkdir(exist_ok=True)

    config_file = config_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(sample_config, f, indent=2)

    print(f"Sample configuration created at {config_file}")
    print("Please edit this file with the product you want to scrape.")


def main():
    """Main CLI interface."""
    parser = argparse.ArgumentParser(
        description="Trustpilot Review Scraper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Scrape the configured product
  python3 main.py scrape

  # Scrape a specific product
  python3 main.py scrape --product invideo.io

  # Create sample configuration
  python3 main.py init-config
        """,
    )

    parser.add_argument(
        "--config",
        default="config/config.json",
        help="Path to configuration file (default: config/config.json)",
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Scrape command
    scrape_parser = subparsers.add_parser("scrape", help="Scrape all reviews of a product")
    scrape_parser.add_argument("--product", help="Product to scrape (overrides config file)")
    scrape_parser.add_argument("--output", help="Output JSON file (overrides config file)")

    # Init config command
    subparsers.add_parser("init-config", help="Create sample configuration file")

    args = parser.parse_args()

    config = load_config(args.config)
    setup_logging(config, args.verbose)

    try:
        if args.command == "scrape":
            path = asyncio.run(run_scraper(config, args.product, args.output))
            print(f"Reviews written to {path}")

        elif args.command == "init-config":
            create_sample_config()

        else:
            parser.print_help()

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except FatalFetchError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
