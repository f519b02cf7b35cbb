"""
Data Seeder for ContextTasks.
Populates the configured store with demo tasks and a few weeks of completions.

Usage:
    python scripts/seed_data.py [--reset]
"""

import sys
import random
from datetime import datetime, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from contexttasks.domain.models import Task, TaskContext
from contexttasks.infra.config import get_settings, configure_logging
from contexttasks.infra.repository import open_repository

DEMO_TASKS = [
    ("Email client", TaskContext.QUICK, 10, ["work"]),
    ("Pay electricity bill", TaskContext.QUICK, 5, ["home"]),
    ("Reply to Sam", TaskContext.QUICK, 5, []),
    ("Write project proposal", TaskContext.FOCUSED, 90, ["work", "writing"]),
    ("Review Q4 budget", TaskContext.FOCUSED, 60, ["work"]),
    ("Study chapter 3", TaskContext.FOCUSED, 45, ["learning"]),
    ("Water the plants", TaskContext.LOW_ENERGY, 10, ["home"]),
    ("Sort photos", TaskContext.LOW_ENERGY, 30, []),
    ("Tidy desk", TaskContext.LOW_ENERGY, 15, ["home"]),
]


def seed(reset: bool = False):
    settings = get_settings()
    repo = open_repository(settings.get_db_url())

    if reset:
        print("Clearing existing data...")
        repo.clear_all()

    print("Starting data seeding...")
    now = datetime.now()
    rng = random.Random(42)

    # Open tasks
    for index, (title, context, duration, tags) in enumerate(DEMO_TASKS):
        created = now - timedelta(days=rng.randint(0, 10), minutes=index)
        task = Task(
            id=str(int(created.timestamp() * 1000)),
            title=title,
            context=context,
            duration=duration,
            tags=tags,
            created_at=created
        )
        repo.add_task(task)
        print(f"Created task: {title}")

    # Completed history over the last three weeks
    completed = 0
    for days_ago in range(21):
        for n in range(rng.randint(0, 4)):
            title, context, duration, tags = rng.choice(DEMO_TASKS)
            done_at = (now - timedelta(days=days_ago)).replace(
                hour=rng.randint(7, 22), minute=rng.randint(0, 59), second=0, microsecond=0
            )
            if done_at > now:
                continue
            task = Task(
                id=f"{int(done_at.timestamp() * 1000)}-{n}",
                title=title,
                context=context,
                duration=duration,
                tags=tags,
                created_at=done_at - timedelta(hours=1)
            )
            repo.add_task(task)
            repo.complete_task(task.id, done_at)
            completed += 1

    print(f"Seeding complete: {len(DEMO_TASKS)} open tasks, {completed} completions.")


if __name__ == "__main__":
    configure_logging()
    seed(reset="--reset" in sys.argv)
