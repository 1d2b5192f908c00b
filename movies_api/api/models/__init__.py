"""
Pydantic schemas for API request validation.
"""

from movies_api.api.models.movie import GENRES, Genre, MovieCreate, MovieUpdate

__all__ = [
    "GENRES",
    "Genre",
    "MovieCreate",
    "MovieUpdate",
]
