"""
FastAPI dependency injection for the movie store.
"""

from fastapi import Request

from movies_api.database.store import MovieStore


def get_store(request: Request) -> MovieStore:
    """Return the store owned by the running application."""
    return request.app.state.store
