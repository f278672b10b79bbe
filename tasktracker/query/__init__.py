from .builder import TaskQuery, apply_query, build_query
from .filters import filter_tasks, matches_term, search_tasks
from .overdue import is_overdue
from .sorting import PRIORITY_RANK, STATUS_RANK, SortKey, sort_tasks
from .stats import TaskStats, aggregate_stats

__all__ = [
    "PRIORITY_RANK",
    "STATUS_RANK",
    "SortKey",
    "TaskQuery",
    "TaskStats",
    "aggregate_stats",
    "apply_query",
    "build_query",
    "filter_tasks",
    "is_overdue",
    "matches_term",
    "search_tasks",
    "sort_tasks",
]
