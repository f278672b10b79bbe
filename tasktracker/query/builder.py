from dataclasses import dataclass
from typing import Iterable, List, Optional

from ..models import Task
from .filters import filter_tasks, normalize_term
from .sorting import SortKey, parse_sort_key, sort_tasks


@dataclass(frozen=True)
class TaskQuery:
    """Selection and ordering for a task list view.

    ``None`` fields are unconstrained; ``sort=None`` keeps natural order.
    """
    status: Optional[str] = None
    priority: Optional[str] = None
    sort: Optional[SortKey] = None
    term: Optional[str] = None


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    # Only an empty parameter is absent; other values are matched exactly.
    return value or None


def build_query(
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort: Optional[str] = None,
    term: Optional[str] = None,
) -> TaskQuery:
    """Build a TaskQuery from raw request parameters.

    Empty strings count as absent, and an unrecognized ``sort`` falls back to
    natural order rather than failing.
    """
    return TaskQuery(
        status=_blank_to_none(status),
        priority=_blank_to_none(priority),
        sort=parse_sort_key(_blank_to_none(sort)),
        term=normalize_term(term),
    )


def apply_query(tasks: Iterable[Task], query: TaskQuery) -> List[Task]:
    """Filter then order a task snapshot according to ``query``."""
    selected = filter_tasks(
        tasks,
        status=query.status,
        priority=query.priority,
        term=query.term,
    )
    return sort_tasks(selected, query.sort.value if query.sort else None)
