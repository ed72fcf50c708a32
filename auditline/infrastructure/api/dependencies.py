"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from auditline.adapters.persistence.database import get_session
from auditline.adapters.persistence.repositories import (
    SqlAddendumRepository,
    SqlLetterRepository,
)
from auditline.application.use_cases.build_timeline import (
    BuildTimelineUseCase,
    LayoutOptions,
    TimelineCache,
)
from auditline.config import settings


def layout_options() -> LayoutOptions:
    return LayoutOptions(
        column_width=settings.timeline_column_width,
        minimum_width=settings.timeline_min_width,
        range_cap=settings.timeline_range_cap,
        presort_rows=settings.timeline_presort_rows,
    )


def get_timeline_cache(request: Request) -> TimelineCache:
    """The cache lives on the app instance, created in the lifespan."""
    cache = getattr(request.app.state, "timeline_cache", None)
    if cache is None:
        cache = TimelineCache(settings.timeline_cache_size)
        request.app.state.timeline_cache = cache
    return cache


def get_letter_repo(session: AsyncSession = Depends(get_session)) -> SqlLetterRepository:
    return SqlLetterRepository(session)


def get_addendum_repo(session: AsyncSession = Depends(get_session)) -> SqlAddendumRepository:
    return SqlAddendumRepository(session)


def get_build_timeline_uc(
    letter_repo: SqlLetterRepository = Depends(get_letter_repo),
    addendum_repo: SqlAddendumRepository = Depends(get_addendum_repo),
    cache: TimelineCache = Depends(get_timeline_cache),
) -> BuildTimelineUseCase:
    return BuildTimelineUseCase(
        letter_repo=letter_repo,
        addendum_repo=addendum_repo,
        cache=cache,
        options=layout_options(),
    )
