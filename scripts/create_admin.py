"""
Name: Admin Bootstrap Script

Responsibilities:
  - Create an admin account (idempotent: existing email is reported, not changed)
  - Hash passwords with Argon2 (same hasher as the API)
  - Store the account through PostgresUserRepository (uq_users_email applies)
"""

from __future__ import annotations

import argparse
import getpass
import os
import sys

ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from user_lifecycle.crosscutting.config import get_settings  # noqa: E402
from user_lifecycle.domain.entities import UserRole  # noqa: E402
from user_lifecycle.domain.errors import DuplicateRecordError  # noqa: E402
from user_lifecycle.identity.passwords import Argon2PasswordHasher  # noqa: E402
from user_lifecycle.infrastructure.db.pool import close_pool, init_pool  # noqa: E402
from user_lifecycle.infrastructure.repositories import (  # noqa: E402
    PostgresUserRepository,
)


def _prompt_email() -> str:
    email = input("Email: ").strip()
    if not email:
        raise SystemExit("Email is required.")
    return email


def _prompt_password() -> str:
    password = getpass.getpass("Password: ")
    if not password:
        raise SystemExit("Password is required.")
    confirm = getpass.getpass("Confirm password: ")
    if password != confirm:
        raise SystemExit("Passwords do not match.")
    return password


def _parse_args() -> argparse.Namespace:
    argv = sys.argv[1:]
    if argv and argv[0] == "--":
        argv = argv[1:]
    parser = argparse.ArgumentParser(description="Create an admin user (idempotent).")
    parser.add_argument("--email", help="User email (stored as given, trimmed)")
    parser.add_argument(
        "--password",
        help="User password (omit to be prompted securely)",
    )
    parser.add_argument(
        "--role",
        default=UserRole.ADMIN.value,
        choices=[role.value for role in UserRole],
        help="User role (default: admin)",
    )
    return parser.parse_args(argv)


def main() -> None:
    args = _parse_args()
    settings = get_settings()
    if not settings.database_url:
        raise SystemExit("DATABASE_URL is required to create a user.")

    email = args.email.strip() if args.email else _prompt_email()
    password = args.password or _prompt_password()

    init_pool(settings.database_url, min_size=1, max_size=1)
    try:
        repo = PostgresUserRepository()
        hasher = Argon2PasswordHasher.from_settings(settings)
        try:
            user = repo.create_user(
                email=email,
                password_hash=hasher.hash(password),
                role=UserRole(args.role),
            )
        except DuplicateRecordError:
            existing = repo.get_user_by_email(email)
            print(
                "User already exists: "
                f"id={existing.id if existing else '?'} email={email}"
            )
            return
        print(f"Created user: id={user.id} email={user.email} role={user.role.value}")
    finally:
        close_pool()


if __name__ == "__main__":
    main()
