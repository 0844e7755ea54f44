"""
Aviary Backend — Birds Route Handlers
=======================================

What:  GET /birds (JSON) and GET /birds/plain (text).
How:   Read all birds through BirdService, shape them with bird_renderer,
       return the payload directly.

The JSON shape is chosen by BIRDS_RENDER_MODE. The mode comes in through the
get_render_mode dependency so tests and embedding apps can override it with
app.dependency_overrides.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.schemas.bird import BirdEnvelope, ErrorResponse
from app.services.bird_renderer import render_birds, render_plain
from app.services.bird_service import bird_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Birds"])


def get_render_mode() -> str:
    """Render mode for GET /birds, from settings."""
    return settings.birds_render_mode


@router.get(
    "/birds",
    response_class=JSONResponse,
    responses={
        200: {
            "description": (
                "All birds in id order. A bare array in 'flat' mode, an envelope "
                "object in 'envelope' mode, a one-element array holding the "
                "envelope in 'wrapped_envelope' mode."
            ),
            "model": BirdEnvelope,
        },
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all birds as JSON",
)
async def list_birds(
    mode: str = Depends(get_render_mode),
    db: AsyncSession = Depends(get_db_session),
) -> JSONResponse:
    birds = await bird_service.list_birds(db)
    return JSONResponse(content=render_birds(birds, mode=mode))


@router.get(
    "/birds/plain",
    response_class=PlainTextResponse,
    responses={
        200: {"description": "Messages, then one '<id>. <name> (<species>)' line per bird"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all birds as plain text",
)
async def list_birds_plain(
    db: AsyncSession = Depends(get_db_session),
) -> PlainTextResponse:
    """Same data as GET /birds, rendered as text/plain instead of JSON."""
    birds = await bird_service.list_birds(db)
    return PlainTextResponse(render_plain(birds))
