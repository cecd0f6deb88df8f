# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT

"""Backend API service main entrypoint."""

# Necessary for running stuff before other imports
# ruff: noqa: E402

from common import __version__
from common.config import config
from common.logging_config import configure_logging

# Initialize logging early
configure_logging(service_name=config.SERVICE_NAME, service_version=__version__)

from fastapi import FastAPI

from api.routes import router


def create_app() -> FastAPI:
    """FastAPI factory for the backend API."""
    app = FastAPI(
        title="Backend API",
        version=__version__,
        description="Answers GET / with a static greeting",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(router)
    return app


app = create_app()
