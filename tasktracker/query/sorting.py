from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional
import enum

from ..models import Task, TaskPriority, TaskStatus
from .overdue import as_naive_utc


class SortKey(str, enum.Enum):
    DATE = "date"
    PRIORITY = "priority"
    STATUS = "status"


PRIORITY_RANK: Dict[str, int] = {
    TaskPriority.HIGH.value: 1,
    TaskPriority.MEDIUM.value: 2,
    TaskPriority.LOW.value: 3,
}

STATUS_RANK: Dict[str, int] = {
    TaskStatus.TODO.value: 1,
    TaskStatus.IN_PROGRESS.value: 2,
    TaskStatus.DONE.value: 3,
}


def _rank(table: Dict[str, int], value: str) -> int:
    # Values outside the enum rank after every known value.
    return table.get(value, len(table) + 1)


def _by_due_date(task: Task):
    due_date = as_naive_utc(task.due_date)
    # Undated tasks go last.
    return (due_date is None, due_date or datetime.min)


def _by_priority(task: Task):
    return _rank(PRIORITY_RANK, task.priority)


def _by_status(task: Task):
    return _rank(STATUS_RANK, task.status)


_SORT_KEYS: Dict[SortKey, Callable] = {
    SortKey.DATE: _by_due_date,
    SortKey.PRIORITY: _by_priority,
    SortKey.STATUS: _by_status,
}


def parse_sort_key(value: Optional[str]) -> Optional[SortKey]:
    """Map a raw ``sort`` parameter to a SortKey; unknown values become None."""
    if not value:
        return None
    try:
        return SortKey(value)
    except ValueError:
        return None


def sort_tasks(tasks: Iterable[Task], sort: Optional[str]) -> List[Task]:
    """Return ``tasks`` ordered by ``sort``.

    The sort is stable, so ties keep their input order. A missing or
    unrecognized key leaves the input order untouched.
    """
    key = parse_sort_key(sort)
    if key is None:
        return list(tasks)
    return sorted(tasks, key=_SORT_KEYS[key])
