"""Greeting served at the site root."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from cloud_assignment.settings import GREETING

router = APIRouter(tags=["greeting"])


@router.get("/", summary="Greeting", response_class=PlainTextResponse)
async def greeting() -> str:
    return GREETING
