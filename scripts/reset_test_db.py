"""
Name: Test Database Reset

Responsibilities:
  - Remove every user account from the test database (TRUNCATE ... CASCADE)
  - Refuse to run against a production APP_ENV
"""

from __future__ import annotations

import os
import sys

import psycopg

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from user_lifecycle.crosscutting.config import get_settings  # noqa: E402


def reset_users(database_url: str) -> None:
    with psycopg.connect(database_url) as conn:
        conn.execute("TRUNCATE TABLE users RESTART IDENTITY CASCADE")
        conn.commit()


def main() -> None:
    settings = get_settings()
    if settings.is_production():
        raise SystemExit("Refusing to reset the database with APP_ENV=production.")
    if not settings.database_url:
        raise SystemExit("DATABASE_URL is required.")

    reset_users(settings.database_url)
    print("users table truncated")


if __name__ == "__main__":
    main()
