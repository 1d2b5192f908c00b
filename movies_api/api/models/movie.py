"""
Pydantic schemas for Movie API.
"""

from datetime import date
from typing import Any, Literal, Union, get_args

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

Genre = Literal[
    "Action",
    "Adventure",
    "Comedy",
    "Crime",
    "Drama",
    "Fantasy",
    "Horror",
    "Thriller",
    "Sci-Fi",
]
GENRES = get_args(Genre)

MIN_YEAR = 1900

_url_adapter = TypeAdapter(AnyUrl)


def max_year() -> int:
    """Latest accepted release year: next calendar year."""
    return date.today().year + 1


class MovieBase(BaseModel):
    """Validators shared by create and update payloads."""

    # Unknown keys (including a client-supplied id) are dropped.
    model_config = ConfigDict(extra="ignore")

    @field_validator("year", "duration", "rate", mode="before", check_fields=False)
    @classmethod
    def number_not_text(cls, value: Any) -> Any:
        # Lax int/float parsing would accept "1994" and true; JSON numbers
        # such as 1994.0 still pass and are narrowed to int where required.
        if isinstance(value, (str, bool)):
            raise ValueError("Expected a number")
        return value

    @field_validator("year", check_fields=False)
    @classmethod
    def year_not_in_future(cls, value: int) -> int:
        upper = max_year()
        if value > upper:
            raise ValueError(f"Movie year must be at most {upper}")
        return value

    @field_validator("rate", check_fields=False)
    @classmethod
    def rate_as_sent(cls, value: float) -> Union[int, float]:
        # 8 and 8.0 are the same JSON number; echo it back without a fraction
        return int(value) if float(value).is_integer() else value

    @field_validator("poster", check_fields=False)
    @classmethod
    def poster_is_url(cls, value: str) -> str:
        try:
            _url_adapter.validate_python(value)
        except ValidationError:
            raise ValueError("Poster must be a valid URL") from None
        return value


class MovieCreate(MovieBase):
    """Request body for creating a movie."""

    title: str = Field(..., min_length=1)
    year: int = Field(..., ge=MIN_YEAR)
    director: str = Field(..., min_length=1)
    duration: int = Field(..., gt=0)
    rate: float = Field(0, ge=0, le=10)
    poster: str
    genre: list[Genre] = Field(..., min_length=1)


class MovieUpdate(MovieBase):
    """Request body for updating a movie (all fields optional)."""

    title: str | None = Field(None, min_length=1)
    year: int | None = Field(None, ge=MIN_YEAR)
    director: str | None = Field(None, min_length=1)
    duration: int | None = Field(None, gt=0)
    rate: float | None = Field(None, ge=0, le=10)
    poster: str | None = None
    genre: list[Genre] | None = Field(None, min_length=1)

    @field_validator("*", mode="before")
    @classmethod
    def present_fields_not_null(cls, value: Any) -> Any:
        # None only stands for "omitted"; a sent null is an error
        if value is None:
            raise ValueError("Field may be omitted but not null")
        return value
