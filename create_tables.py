"""
create_tables.py
----------------
Create the job board schema and, optionally, the first platform
super-admin (there is no HTTP route that can create one).
Alembic should own migrations once the schema starts changing.

Usage:
    python create_tables.py
    python create_tables.py --super-admin ops@example.com 'a-long-password'
"""

import argparse
import asyncio

from jobboard.core.logging import configure_logging, get_logger
from jobboard.db.session import build_engine, session_scope
from jobboard.models import AdminRole, AdminUser, Base
from jobboard.services.user_service import UserService

logger = get_logger("create_tables")


async def create_all_tables() -> None:
    engine = build_engine(echo=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    await engine.dispose()
    logger.info("Tables created", tables=sorted(Base.metadata.tables))


async def create_super_admin(email: str, password: str) -> None:
    async with session_scope() as db:
        user = await UserService.create_account(db, email, password)
        db.add(AdminUser(user_id=user.id, role=AdminRole.platform_super_admin.value))
    logger.info("Super-admin created", user_id=user.id, email=user.email)


async def main(args: argparse.Namespace) -> None:
    configure_logging()
    await create_all_tables()
    if args.super_admin:
        await create_super_admin(*args.super_admin)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the job board schema.")
    parser.add_argument("--super-admin", nargs=2, metavar=("EMAIL", "PASSWORD"))
    asyncio.run(main(parser.parse_args()))
