# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT
"""HTTP routes of the backend API."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from common.config import config

router = APIRouter()


@router.api_route("/", methods=["GET", "HEAD"], response_class=PlainTextResponse)
async def greeting() -> PlainTextResponse:
    """Return the static greeting; HEAD gets the same headers without a body."""
    return PlainTextResponse(config.GREETING)
