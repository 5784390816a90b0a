"""Show directory: joins shows with their movie and theater and guards writes."""

import functools
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import pydantic
from sqlalchemy import Select, delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from marquee.exceptions import NotFound, StoreFailure, ValidationError
from marquee.models import Movie, Show, Theater
from marquee.schemas import MovieSummary, ShowCreate, ShowDetail, ShowListing, TheaterSummary
from marquee.services.observers import DirectoryObserver, LoggingObserver

logger = logging.getLogger(__name__)

T = TypeVar("T")

REQUIRED_FIELDS = ("movie_id", "theater_id", "show_time", "price")

# Identity columns are 32-bit integers
MIN_ID = -(2**31)
MAX_ID = 2**31 - 1


def observed(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """Report entry, result and error of a directory operation to its observer."""
    signature = inspect.signature(func)
    operation = func.__name__

    @functools.wraps(func)
    async def wrapper(self: "ShowDirectory", *args: Any, **kwargs: Any) -> T:
        bound = signature.bind(self, *args, **kwargs)
        params = {k: v for k, v in bound.arguments.items() if k != "self"}
        self._notify("on_entry", operation, params)
        try:
            result = await func(self, *args, **kwargs)
        except Exception as e:
            self._notify("on_error", operation, e)
            raise
        self._notify("on_result", operation, result)
        return result

    return wrapper


def is_missing(value: Any) -> bool:
    """True for values a create request treats as absent."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def storable_id(value: int) -> bool:
    """True if ``value`` fits an identity column; no row can have any other id."""
    return MIN_ID <= value <= MAX_ID


def listing_select() -> Select:
    """Shows joined with movie and theater, flattened into one row each."""
    return (
        select(
            Show.id,
            Show.movie_id,
            Show.theater_id,
            Show.show_time,
            Show.price,
            Movie.title.label("movie_title"),
            Movie.duration,
            Movie.genre,
            Movie.image_url,
            Theater.name.label("theater_name"),
            Theater.location,
        )
        .join(Movie, Show.movie_id == Movie.id)
        .join(Theater, Show.theater_id == Theater.id)
    )


def detail_select() -> Select:
    """Shows joined with every movie and theater field needed for nesting."""
    return (
        select(
            Show.id,
            Show.movie_id,
            Show.theater_id,
            Show.show_time,
            Show.price,
            Movie.title,
            Movie.duration,
            Movie.genre,
            Movie.description,
            Movie.image_url,
            Theater.name.label("theater_name"),
            Theater.location,
        )
        .join(Movie, Show.movie_id == Movie.id)
        .join(Theater, Show.theater_id == Theater.id)
    )


def nest_row(row: Any) -> ShowDetail:
    """Fold one joined row from ``detail_select`` into a nested show record."""
    return ShowDetail(
        id=row.id,
        movie_id=row.movie_id,
        theater_id=row.theater_id,
        show_time=row.show_time,
        price=row.price,
        movie=MovieSummary(
            id=row.movie_id,
            title=row.title,
            duration=row.duration,
            genre=row.genre,
            description=row.description,
            image_url=row.image_url,
        ),
        theater=TheaterSummary(
            id=row.theater_id,
            name=row.theater_name,
            location=row.location,
        ),
    )


class ShowDirectory:
    """
    Read/write access to shows and their joined movie and theater data.

    The directory is built per request around an injected session and keeps
    no state of its own between calls. Existence of the referenced movie and
    theater is checked explicitly before a show is inserted rather than left
    to foreign-key enforcement. Those checks and the insert are not wrapped
    in a transaction, so a movie or theater deleted concurrently between the
    check and the insert is not detected here.
    """

    def __init__(
        self,
        session: AsyncSession,
        observer: DirectoryObserver | None = None,
    ) -> None:
        self.session = session
        self.observer = observer or LoggingObserver()

    @observed
    async def list_all(self) -> list[ShowListing]:
        """All shows, flattened, in whatever order the store returns them."""
        result = await self._execute(listing_select())
        return [ShowListing.model_validate(row) for row in result.all()]

    @observed
    async def list_by_theater(self, theater_id: int) -> list[ShowDetail]:
        """
        Nested shows at one theater, earliest first.

        An unknown theater gives an empty list, same as a theater with no shows.
        """
        if not storable_id(theater_id):
            return []
        stmt = (
            detail_select()
            .where(Show.theater_id == theater_id)
            .order_by(Show.show_time.asc())
        )
        result = await self._execute(stmt)
        return [nest_row(row) for row in result.all()]

    @observed
    async def get_by_id(self, show_id: int) -> ShowDetail:
        """Nested show with the given id, or NotFound."""
        return await self._fetch_detail(show_id)

    @observed
    async def create(
        self,
        movie_id: Any,
        theater_id: Any,
        show_time: Any,
        price: Any,
    ) -> ShowDetail:
        """
        Validate and insert a show, returning it re-read with movie and theater.

        Raises:
            ValidationError: a field is missing, empty or malformed
            NotFound: the movie or theater does not exist
            StoreFailure: the database failed a statement
        """
        draft = self._parse_draft(
            movie_id=movie_id,
            theater_id=theater_id,
            show_time=show_time,
            price=price,
        )

        if not storable_id(draft.movie_id):
            raise NotFound("Movie not found")
        movie = await self._execute(select(Movie.id).where(Movie.id == draft.movie_id))
        if movie.scalar_one_or_none() is None:
            raise NotFound("Movie not found")

        if not storable_id(draft.theater_id):
            raise NotFound("Theater not found")
        theater = await self._execute(select(Theater.id).where(Theater.id == draft.theater_id))
        if theater.scalar_one_or_none() is None:
            raise NotFound("Theater not found")

        show = Show(**draft.model_dump())
        self.session.add(show)
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreFailure(str(e)) from e
        await self._commit()

        logger.debug(f"Inserted show {show.id}")
        return await self._fetch_detail(show.id)

    @observed
    async def delete(self, show_id: int) -> None:
        """Delete one show. Deleting an id that is not present raises NotFound."""
        if not storable_id(show_id):
            raise NotFound("Show not found")
        result = await self._execute(delete(Show).where(Show.id == show_id))
        if result.rowcount == 0:
            raise NotFound("Show not found")
        await self._commit()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _parse_draft(self, **fields: Any) -> ShowCreate:
        if any(is_missing(fields[name]) for name in REQUIRED_FIELDS):
            raise ValidationError("All fields are required")
        try:
            return ShowCreate(**fields)
        except pydantic.ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            raise ValidationError(f"Invalid {field}: {error['msg']}") from e

    async def _fetch_detail(self, show_id: int) -> ShowDetail:
        if not storable_id(show_id):
            raise NotFound("Show not found")
        result = await self._execute(detail_select().where(Show.id == show_id))
        # A faulty join could yield duplicates; the first row wins
        row = result.first()
        if row is None:
            raise NotFound("Show not found")
        return nest_row(row)

    async def _execute(self, stmt: Any) -> Any:
        try:
            return await self.session.execute(stmt)
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreFailure(str(e)) from e

    async def _commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreFailure(str(e)) from e

    def _notify(self, hook: str, operation: str, payload: Any) -> None:
        try:
            getattr(self.observer, hook)(operation, payload)
        except Exception:
            logger.exception(f"Observer {hook} failed for {operation}")
