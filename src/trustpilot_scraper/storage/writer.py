"""
JSON export of scraped product reviews.
"""

import json
import logging
from pathlib import Path
from typing import Union

from ..models.review import ProductReviewSet

logger = logging.getLogger(__name__)


def export_to_json(review_set: ProductReviewSet, output_file: Union[str, Path]) -> int:
    """
    Write a product's reviews to a JSON file as one record.

    Args:
        review_set: Reviews collected for a product
        output_file: Path to output JSON file

    Returns:
        Number of reviews exported
    """
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(review_set.to_dict(), f, indent=2, ensure_ascii=False)

    logger.info(f"Exported {len(review_set)} reviews to {output_file}")
    return len(review_set)
