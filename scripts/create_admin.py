"""
Create (or reset the password of) a dashboard administrator.

Usage:
    python scripts/create_admin.py USERNAME [PASSWORD]

Uses DATABASE_URL from the environment / .env, like the backend itself.
The password is prompted for when omitted, and stored hashed.
"""

from __future__ import annotations

import asyncio
import getpass
import sys

from staffdesk.auth import ensure_admin
from staffdesk.config import get_settings
from staffdesk.database import Database
from staffdesk.repository import AdminRepository
from staffdesk.validators import validate_login


async def create_admin(username: str, password: str) -> None:
    database = Database(get_settings().database_url)
    try:
        await database.connect()
        async with database.session() as session:
            admin = await ensure_admin(AdminRepository(session), username, password)
            print(f"OK: administrator {admin.username!r} (_id={admin.id})")
    finally:
        await database.dispose()


def main(argv: list[str]) -> int:
    if not 1 <= len(argv) <= 2:
        print(__doc__)
        return 2

    username = argv[0]
    password = argv[1] if len(argv) == 2 else getpass.getpass("Password: ")

    # Same rules the login form enforces, so the account can actually log in
    result = validate_login({"f_userName": username, "f_Pwd": password})
    if not result.ok:
        for error in result.errors:
            print(f"Invalid: {error.message}")
        return 1

    asyncio.run(create_admin(username, password))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
