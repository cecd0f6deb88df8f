# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT
"""uvicorn server wiring for the backend API."""

import logging
import socket

import uvicorn

from common.config import config

logger = logging.getLogger("api")


class BackendServer(uvicorn.Server):
    """uvicorn server that announces the port once the listener is bound.

    Bind failures are left to uvicorn, which logs the ``OSError`` and exits
    the process with its non-zero startup-failure code.
    """

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(f"Backend API running on port {self.config.port}")


def build_server(host: str = config.HOST, port: int = config.PORT) -> BackendServer:
    """Create a server for the API app without starting it."""
    from api.main import app

    return BackendServer(
        uvicorn.Config(
            app,
            host=host,
            port=port,
            log_config=None,
            log_level="warning",
            access_log=False,
        )
    )


def run(host: str = config.HOST, port: int = config.PORT) -> None:
    """Serve the API until the process is told to stop; Ctrl+C exits quietly."""
    try:
        build_server(host=host, port=port).run()
    except KeyboardInterrupt:
        pass
