from typing import Dict, List, NamedTuple

from .models import TaskPriority, TaskStatus
from .query import SortKey


class DisplayMeta(NamedTuple):
    label: str
    color: str


STATUS_DISPLAY: Dict[str, DisplayMeta] = {
    TaskStatus.TODO.value: DisplayMeta("To do", "default"),
    TaskStatus.IN_PROGRESS.value: DisplayMeta("In progress", "primary"),
    TaskStatus.DONE.value: DisplayMeta("Done", "success"),
}

PRIORITY_DISPLAY: Dict[str, DisplayMeta] = {
    TaskPriority.HIGH.value: DisplayMeta("High", "#d32f2f"),
    TaskPriority.MEDIUM.value: DisplayMeta("Medium", "#ff9800"),
    TaskPriority.LOW.value: DisplayMeta("Low", "#2e7d32"),
}

SORT_LABELS: Dict[str, str] = {
    SortKey.DATE.value: "Due date",
    SortKey.PRIORITY.value: "Priority",
    SortKey.STATUS.value: "Status",
}


def status_display(value: str) -> DisplayMeta:
    """Label and color for a status; unknown values show as themselves."""
    return STATUS_DISPLAY.get(value, DisplayMeta(value, "default"))


def priority_display(value: str) -> DisplayMeta:
    return PRIORITY_DISPLAY.get(value, DisplayMeta(value, "default"))


def display_options() -> Dict[str, List[dict]]:
    """Everything a client needs to render the filter and form selects."""
    return {
        "status": [
            {"value": value, **status_display(value)._asdict()}
            for value in STATUS_DISPLAY
        ],
        "priority": [
            {"value": value, **priority_display(value)._asdict()}
            for value in PRIORITY_DISPLAY
        ],
        "sort": [
            {"value": value, "label": label}
            for value, label in SORT_LABELS.items()
        ],
    }
