"""Insert a few sample tasks into an empty database."""
from datetime import datetime, timedelta
from typing import List

from tasktracker.database import create_tables, get_session
from tasktracker.models import Task, TaskPriority, TaskStatus


def sample_tasks(now: datetime) -> List[Task]:
    return [
        Task(
            title="Fix login bug",
            description="Session cookie is dropped after refresh",
            status=TaskStatus.IN_PROGRESS.value,
            priority=TaskPriority.HIGH.value,
            due_date=now - timedelta(days=1),
            tags="bug,auth",
        ),
        Task(
            title="Write release notes",
            priority=TaskPriority.MEDIUM.value,
            due_date=now + timedelta(days=3),
            tags="docs",
        ),
        Task(
            title="Clean up old branches",
            status=TaskStatus.DONE.value,
            priority=TaskPriority.LOW.value,
        ),
    ]


def seed() -> int:
    """Create tables and seed them; returns how many tasks were added."""
    create_tables()

    with get_session() as db:
        if db.query(Task).first():
            return 0
        tasks = sample_tasks(datetime.utcnow())
        db.add_all(tasks)
        db.commit()
        return len(tasks)


if __name__ == "__main__":
    added = seed()
    if added:
        print(f"Seeded {added} tasks")
    else:
        print("Tasks already exist, nothing to seed")
