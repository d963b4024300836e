"""
Task API - Sample Data

Resets the database and fills it with three users and their tasks.
Run with `taskapi-seed` or `python -m taskapi.seed`.
"""

import asyncio
import logging

from sqlalchemy import func, select

from taskapi.config import settings
from taskapi.database import Database
from taskapi.auth.models import User
from taskapi.auth.service import hash_password
from taskapi.tasks.models import Task

logger = logging.getLogger(__name__)

SAMPLE_PASSWORD = "password123"

SAMPLE_USERS = [
    ("John Doe", "john@example.com"),
    ("Jane Smith", "jane@example.com"),
    ("Mike Johnson", "mike@example.com"),
]

# (owner index into SAMPLE_USERS, title, description, priority, completed)
SAMPLE_TASKS = [
    (0, "Complete project documentation", "Write comprehensive documentation for the API project", "high", False),
    (0, "Review code changes", "Review pull requests from team members", "medium", True),
    (0, "Update dependencies", "Update all packages to latest versions", "low", False),
    (1, "Design new user interface", "Create mockups for the new dashboard design", "high", False),
    (1, "Test API endpoints", "Perform comprehensive testing of all API endpoints", "medium", False),
    (1, "Setup CI/CD pipeline", "Configure automated testing and deployment", "high", True),
    (2, "Database optimization", "Optimize database queries for better performance", "medium", False),
    (2, "Security audit", "Perform security audit of the application", "high", False),
    (2, "Write unit tests", "Add unit tests for all API endpoints", "medium", True),
    (2, "Deploy to production", "Deploy the application to production environment", "high", False),
]


async def seed_database(db: Database) -> int:
    """Drop all data, insert the samples and return the number of tasks."""
    await db.reset()

    # One hash for every sample user, like the shared sample password
    password_hash = hash_password(SAMPLE_PASSWORD)

    async with db.session() as session:
        users = [User(name=name, email=email, password_hash=password_hash) for name, email in SAMPLE_USERS]
        session.add_all(users)
        await session.flush()

        session.add_all(
            Task(
                user_id=users[owner].id,
                title=title,
                description=description,
                priority=priority,
                completed=completed,
            )
            for owner, title, description, priority, completed in SAMPLE_TASKS
        )
        await session.commit()

        total = await session.scalar(select(func.count()).select_from(Task))

    logger.info("Database seeded successfully")
    logger.info("Sample users created:")
    for _, email in SAMPLE_USERS:
        logger.info(f"- {email} / {SAMPLE_PASSWORD}")
    logger.info(f"Total tasks created: {total}")
    return total


async def _run() -> None:
    db = Database()
    await db.connect(settings.DATABASE_PATH)
    try:
        await seed_database(db)
    finally:
        await db.disconnect()


def main() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    asyncio.run(_run())


if __name__ == "__main__":
    main()
