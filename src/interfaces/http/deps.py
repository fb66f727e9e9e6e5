from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID

from fastapi import Request
from zoneinfo import ZoneInfo

from src.application.errors import InvalidIdentifier
from src.config.settings import Settings, get_settings
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    uow = SQLAlchemyUnitOfWork(session_factory)
    async with uow:
        yield uow


def get_app_settings(request: Request) -> Settings:
    return getattr(request.app.state, "settings", None) or get_settings()


def get_local_tz(request: Request) -> ZoneInfo:
    return ZoneInfo(get_app_settings(request).timezone)


def parse_uuid(value: str, what: str) -> UUID:
    try:
        return UUID(value)
    except (TypeError, ValueError) as exc:
        raise InvalidIdentifier(f"Invalid {what} ID") from exc
