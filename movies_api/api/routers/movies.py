"""
Movie API endpoints.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import JSONResponse

from movies_api.api.dependencies import get_store
from movies_api.core.validation import validate_full, validate_partial
from movies_api.database.store import MovieStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/movies", tags=["movies"])

NOT_FOUND = {"message": "Movie Not Found 404"}
DELETED = {"message": "Movie Deleted 204"}


def _not_found() -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content=NOT_FOUND)


def _invalid(errors: list[dict[str, Any]]) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": errors})


@router.get("")
def list_movies(
    response: Response,
    genre: str | None = Query(None),
    rate: str | None = Query(None),
    store: MovieStore = Depends(get_store),
):
    """List movies, filtered by genre or else by minimum rate."""
    response.headers["Access-Control-Allow-Origin"] = "*"

    if genre:
        return store.filter_by_genre(genre)
    if rate:
        return store.filter_by_rate(rate)
    return store.list_all()


@router.get("/{movie_id}")
def get_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Get movie details by ID."""
    movie = store.find_by_id(movie_id)
    if movie is None:
        return _not_found()
    return movie


@router.post("", status_code=status.HTTP_201_CREATED)
def create_movie(payload: Any = Body(None), store: MovieStore = Depends(get_store)):
    """Create a movie from a full payload; the ID is generated here."""
    result = validate_full({} if payload is None else payload)
    if not result.success:
        logger.info("Rejected movie creation: %d validation error(s)", len(result.errors))
        return _invalid(result.errors)
    return store.insert(result.data)


@router.patch("/{movie_id}")
def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    store: MovieStore = Depends(get_store),
):
    """Apply a partial update; present fields replace the stored values."""
    result = validate_partial({} if payload is None else payload)
    if not result.success:
        logger.info("Rejected update of movie %s: %d validation error(s)", movie_id, len(result.errors))
        return _invalid(result.errors)

    movie = store.replace_by_id(movie_id, result.data)
    if movie is None:
        return _not_found()
    return movie


@router.delete("/{movie_id}")
def delete_movie(movie_id: str, store: MovieStore = Depends(get_store)):
    """Delete a movie by ID."""
    if not store.remove_by_id(movie_id):
        return _not_found()
    return DELETED
