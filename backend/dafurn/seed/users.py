# dafurn/seed/users.py
"""
Seeding command for the users table.
Clears every user and inserts the fixed list of sample profiles.

Usage:
    python -m dafurn.seed
"""
import asyncio
import logging
import sys

from dafurn.config import settings
from dafurn.core.db import init_db, close_db
from dafurn.core.errors import DafurnError
from dafurn.repositories.user_repository import UserRepository
from dafurn.schemas.user import UserCreate

logger = logging.getLogger("uvicorn.error")

# Sample profiles inserted by the seeding command
SAMPLE_USERS: list[UserCreate] = [
    UserCreate(
        username="otito",
        avatar="https://example.com/avatar1.png",
        bio="Backend builder",
        rating=4.9,
        email="otito@example.com",
    ),
    UserCreate(
        username="amara",
        avatar="https://example.com/avatar2.png",
        bio="JavaScript learner",
        rating=4.5,
        email="amara@example.com",
    ),
    UserCreate(
        username="zeke",
        avatar="https://example.com/avatar3.png",
        bio="Data nerd",
        rating=4.2,
        email="zeke@example.com",
    ),
    UserCreate(
        username="mina",
        avatar="https://example.com/avatar4.png",
        bio="Design enthusiast",
        rating=4.7,
        email="mina@example.com",
    ),
    UserCreate(
        username="jay",
        avatar="https://example.com/avatar5.png",
        bio="TypeScript fan",
        rating=4.8,
        email="jay@example.com",
    ),
]


async def seed_users(repo: UserRepository) -> int:
    """
    Reset the users table to SAMPLE_USERS.

    Args:
        repo: Repository bound to an initialised connection

    Returns:
        int: Number of users inserted
    """
    removed = await repo.delete_all()
    logger.info("[seed] Cleared %d existing users", removed)
    created = await repo.insert_many(SAMPLE_USERS)
    logger.info("[seed] Inserted %d users", len(created))
    return len(created)


async def run(db_url: str | None, generate_schemas: bool = True) -> int:
    """
    Connect, seed and disconnect.

    Returns:
        int: Process exit code, 0 on success and 1 on any failure
    """
    try:
        await init_db(db_url, generate_schemas=generate_schemas)
        logger.info("[seed] Connected to database")
        await seed_users(UserRepository())
    except DafurnError as e:
        logger.error("[seed] Error seeding users: %s", e)
        return 1
    finally:
        await close_db()
    logger.info("[seed] Users seeded")
    return 0


def main() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    sys.exit(asyncio.run(run(settings.database_url, settings.generate_schemas)))
