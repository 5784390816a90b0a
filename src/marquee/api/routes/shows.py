"""Shows API endpoints."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from marquee.api.auth import require_api_token
from marquee.database import get_db
from marquee.exceptions import NotFound, ShowDirectoryError
from marquee.schemas import MessageResponse, ShowDetail, ShowListing
from marquee.services.show_directory import ShowDirectory

logger = logging.getLogger(__name__)
router = APIRouter()


def get_show_directory(db: AsyncSession = Depends(get_db)) -> ShowDirectory:
    """Dependency building a directory around the request's session."""
    return ShowDirectory(db)


def error_response(error: ShowDirectoryError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={"error": error.message})


@router.get("/shows", response_model=list[ShowListing])
async def list_shows(
    directory: ShowDirectory = Depends(get_show_directory),
) -> list[ShowListing] | JSONResponse:
    """All shows with movie and theater fields flattened into each row."""
    try:
        return await directory.list_all()
    except ShowDirectoryError as e:
        return error_response(e)


@router.get("/shows/theater/{theater_id}", response_model=list[ShowDetail])
async def list_theater_shows(
    theater_id: int,
    directory: ShowDirectory = Depends(get_show_directory),
) -> list[ShowDetail] | JSONResponse:
    """
    Shows at one theater, ordered by show time.

    A theater with no shows, or no such theater, returns an empty list.
    """
    try:
        return await directory.list_by_theater(theater_id)
    except ShowDirectoryError as e:
        return error_response(e)


@router.get("/shows/{show_id}", response_model=ShowDetail)
async def get_show(
    show_id: int,
    directory: ShowDirectory = Depends(get_show_directory),
) -> ShowDetail | JSONResponse:
    """Single show with its movie and theater embedded."""
    try:
        return await directory.get_by_id(show_id)
    except NotFound:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Show not found"})
    except ShowDirectoryError as e:
        return error_response(e)


@router.post(
    "/shows",
    response_model=ShowDetail,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_token)],
)
async def create_show(
    payload: Any = Body(None),
    directory: ShowDirectory = Depends(get_show_directory),
) -> ShowDetail | JSONResponse:
    """
    Schedule a show.

    The body is taken as-is so that missing fields are reported as a single
    400 rather than per-field validation errors.
    """
    if not isinstance(payload, dict):
        payload = {}
    try:
        return await directory.create(
            movie_id=payload.get("movie_id"),
            theater_id=payload.get("theater_id"),
            show_time=payload.get("show_time"),
            price=payload.get("price"),
        )
    except ShowDirectoryError as e:
        return error_response(e)


@router.delete(
    "/shows/{show_id}",
    response_model=MessageResponse,
    dependencies=[Depends(require_api_token)],
)
async def delete_show(
    show_id: int,
    directory: ShowDirectory = Depends(get_show_directory),
) -> MessageResponse | JSONResponse:
    try:
        await directory.delete(show_id)
    except ShowDirectoryError as e:
        return error_response(e)
    return MessageResponse(message="Show deleted successfully")
