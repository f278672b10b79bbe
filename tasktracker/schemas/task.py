from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List, Optional

from ..models import TaskPriority, TaskStatus
from ..query.overdue import as_naive_utc

class TaskBase(BaseModel):
    """Base task schema with the business fields.

    Writes are validated strictly: unknown status/priority values and blank
    titles are rejected with 422.
    """
    title: str
    description: Optional[str] = None
    status: TaskStatus = TaskStatus.TODO
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[datetime] = None
    tags: Optional[str] = ""

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("title must not be empty")
        return value

    @field_validator("due_date")
    @classmethod
    def _due_date_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_naive_utc(value)

    @field_validator("tags")
    @classmethod
    def _tags_default(cls, value: Optional[str]) -> str:
        return value or ""

    class Config:
        use_enum_values = True
        validate_default = True

class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass

class TaskUpdate(TaskBase):
    """Schema for updating existing tasks (full replace of business fields)."""
    pass

class Task(BaseModel):
    """Complete task schema with all fields."""
    id: int
    title: str
    description: Optional[str] = None
    # Plain strings on the way out so rows with legacy values still serialize.
    status: str
    priority: str
    due_date: Optional[datetime] = None
    tags: Optional[str] = ""
    created_at: datetime
    updated_at: datetime
    overdue: bool = False

    class Config:
        from_attributes = True

class StatusCount(BaseModel):
    status: str
    count: int

class PriorityCount(BaseModel):
    priority: str
    count: int

class TaskStatsResponse(BaseModel):
    """Aggregate counts over the whole collection."""
    status: List[StatusCount]
    priority: List[PriorityCount]
    overdue: int
