# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT


class Config:
    """Application configuration."""

    SERVICE_NAME: str = "backend-api"

    # Listener settings, fixed for the lifetime of the process
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    GREETING: str = "Hello from the Backend API!"


config = Config()
