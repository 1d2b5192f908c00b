"""
API route handlers.
"""

from movies_api.api.routers import movies, system

__all__ = ["movies", "system"]
