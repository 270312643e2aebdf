"""Seed script for enumfield demo data."""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from enumfield.core.db import AsyncSessionLocal, Base, engine
from enumfield.core.definition import all_codes
from enumfield.core.logging import configure_logging, get_logger
from enumfield.core.persistence import count_by_label
from enumfield.models import USER_ROLES, User

logger = get_logger(__name__)

MEMBER_POOL = [
    ("María", "González", "admin"),
    ("Juan", "Pérez", "volunteer"),
    ("Carmen", "Rodríguez", "volunteer"),
    ("Luis", "Martínez", "vendor"),
    ("Ana", "Silva", "customer"),
    ("Carlos", "Benítez", None),
]


async def seed_users(db: AsyncSession) -> list[User]:
    """Create one user per entry in MEMBER_POOL (role None means the default)."""
    result = await db.execute(select(User).limit(1))
    if result.scalar_one_or_none():
        logger.info("seed.users_exist")
        result = await db.execute(select(User))
        return list(result.scalars().all())

    users = []
    for first_name, last_name, role in MEMBER_POOL:
        user = User(
            email=f"{first_name.lower()}.{last_name.lower()}@example.org",
            first_name=first_name,
            last_name=last_name,
            role=role,
        )
        users.append(user)
        db.add(user)

    await db.flush()
    logger.info("seed.users_created", count=len(users))
    return users


async def main():
    """Run seed script."""
    configure_logging()
    logger.info("seed.start", role_codes=dict(all_codes(USER_ROLES)))

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with AsyncSessionLocal() as db:
        users = await seed_users(db)
        await db.commit()
        counts = await count_by_label(db, User.role)

    logger.info("seed.complete", users=len(users), roles=counts)


if __name__ == "__main__":
    asyncio.run(main())
