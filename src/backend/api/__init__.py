# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT
"""Backend API service: a single greeting route served by uvicorn."""
