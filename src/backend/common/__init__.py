# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT
"""Shared configuration and logging for the backend API."""

__version__ = "0.1.0"
