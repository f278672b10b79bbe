from typing import Iterable, List, Optional

from ..models import Task

SEARCH_FIELDS = ("title", "description", "tags")


def normalize_term(term: Optional[str]) -> Optional[str]:
    """Lowercased, stripped search term, or None when there is nothing to match."""
    if term is None:
        return None
    term = term.strip()
    return term.lower() or None


def matches_term(task: Task, term: Optional[str]) -> bool:
    """Case-insensitive substring match against title, description or tags."""
    needle = normalize_term(term)
    if needle is None:
        return True
    for field in SEARCH_FIELDS:
        value = getattr(task, field, None)
        if value and needle in value.lower():
            return True
    return False


def filter_tasks(
    tasks: Iterable[Task],
    status: Optional[str] = None,
    priority: Optional[str] = None,
    term: Optional[str] = None,
) -> List[Task]:
    """Return the tasks satisfying every supplied constraint, in input order.

    ``None`` for a constraint means the field is not constrained.
    """
    needle = normalize_term(term)
    result = []
    for task in tasks:
        if status is not None and task.status != status:
            continue
        if priority is not None and task.priority != priority:
            continue
        if needle is not None and not matches_term(task, needle):
            continue
        result.append(task)
    return result


def search_tasks(tasks: Iterable[Task], term: Optional[str]) -> List[Task]:
    """Full-collection text search without status/priority constraints."""
    return filter_tasks(tasks, term=term)
