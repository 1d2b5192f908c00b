"""
Storage module for the movies API.

Provides the in-memory movie store and seed data loading.
"""

from movies_api.database.store import MovieStore, coerce_rate
from movies_api.database.seed import DEFAULT_SEED_PATH, load_seed

__all__ = [
    'MovieStore',
    'coerce_rate',
    'DEFAULT_SEED_PATH',
    'load_seed',
]
