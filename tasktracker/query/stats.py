from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable

from ..models import Task
from .overdue import is_overdue


@dataclass
class TaskStats:
    """Summary counts over a task collection.

    Only values present in the data appear in ``status`` and ``priority``;
    absent values are not zero-filled. Keys are in first-seen order.
    """
    status: Dict[str, int] = field(default_factory=dict)
    priority: Dict[str, int] = field(default_factory=dict)
    overdue: int = 0


def aggregate_stats(tasks: Iterable[Task], now: datetime) -> TaskStats:
    status_counts: Counter = Counter()
    priority_counts: Counter = Counter()
    overdue = 0
    for task in tasks:
        status_counts[task.status] += 1
        priority_counts[task.priority] += 1
        if is_overdue(task, now):
            overdue += 1
    return TaskStats(
        status=dict(status_counts),
        priority=dict(priority_counts),
        overdue=overdue,
    )
