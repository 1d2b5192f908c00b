"""
Seed data loading for the in-memory movie store.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parents[1] / "data" / "movies.json"


def load_seed(path: Optional[str] = None) -> list[dict[str, Any]]:
    """
    Read the seed movies from a JSON file.

    Args:
        path: JSON file holding a list of movie records (default: packaged seed)

    Returns:
        List of movie dicts in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file does not hold a JSON list
    """
    seed_path = Path(path) if path else DEFAULT_SEED_PATH
    with open(seed_path, "r", encoding="utf-8") as f:
        movies = json.load(f)
    if not isinstance(movies, list):
        raise ValueError(f"Seed file {seed_path} must contain a JSON list")
    logger.info("Loaded %d seed movies from %s", len(movies), seed_path)
    return movies
