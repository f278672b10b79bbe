from datetime import datetime, timezone
from typing import Optional

from ..models import TaskStatus


def as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def is_overdue(task, now: datetime) -> bool:
    """Return True when ``task`` has a due date strictly before ``now`` and is not done.

    Both the per-row ``overdue`` flag and the stats overdue count go through
    this function.
    """
    due_date = as_naive_utc(task.due_date)
    if due_date is None:
        return False
    if task.status == TaskStatus.DONE.value:
        return False
    return due_date < as_naive_utc(now)
