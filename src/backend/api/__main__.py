# SPDX-FileCopyrightText: 2025 backend-api
#
# SPDX-License-Identifier: MIT

"""CLI entry point for the backend API on its fixed port."""


def main() -> None:
    """Start the backend API on port 5000."""
    # Import here to avoid early initialization
    from api.server import run

    run()


if __name__ == "__main__":
    main()
