"""
System API endpoints (health).
"""

from fastapi import APIRouter, Depends

from movies_api.api.dependencies import get_store
from movies_api.database.store import MovieStore

router = APIRouter(tags=["system"])


@router.get("/health")
def health_check(store: MovieStore = Depends(get_store)):
    """Health check: the store is reachable."""
    return {"status": "healthy", "movies": len(store)}
