"""
Create the initial super-admin account.

Registration of further admins goes through ``POST /api/auth/register``,
which requires a super-admin token, so the first account is seeded here.
"""
import argparse
import asyncio
import getpass

from sqlalchemy import select

from bureau.core.config import get_settings
from bureau.db.models import Account
from bureau.infrastructure.database import dispose_engine, get_session_factory, init_db
from bureau.modules.accounts import ROLE_SUPER_ADMIN, AccountCreateInput, AccountService


async def create_default_admin(username: str, email: str, name: str, password: str) -> None:
    await init_db()
    settings = get_settings()

    async with get_session_factory()() as db:
        stmt = select(Account.id).where(Account.role == ROLE_SUPER_ADMIN).limit(1)
        existing_admin = (await db.execute(stmt)).scalar_one_or_none()
        if existing_admin:
            print("A super-admin account already exists; nothing to do")
            return

        service = AccountService.with_session(db, settings.security.bcrypt_rounds)
        account = await service.create_account(
            AccountCreateInput(
                username=username,
                email=email,
                password=password,
                name=name,
                role=ROLE_SUPER_ADMIN,
            )
        )
        await db.commit()

        print("=" * 50)
        print("Super-admin account created")
        print(f"Username: {account.username}")
        print(f"Email:    {account.email}")
        print("=" * 50)


async def _run(username: str, email: str, name: str, password: str) -> None:
    try:
        await create_default_admin(username, email, name, password)
    finally:
        await dispose_engine()


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--username", default="admin")
    parser.add_argument("--email", default="admin@example.com")
    parser.add_argument("--name", default="Administrator")
    args = parser.parse_args()

    password = getpass.getpass("Password (min 6 characters): ")
    if len(password) < 6:
        parser.error("password must be at least 6 characters long")

    asyncio.run(_run(args.username, args.email.lower(), args.name, password))


if __name__ == "__main__":
    main()
