from sqlmodel import SQLModel, Field
from datetime import datetime
from pydantic import NaiveDatetime
from typing import Optional
import enum


class TaskStatus(str, enum.Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskPriority(str, enum.Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Task(SQLModel, table=True):
    """Task model for tracked items.

    ``status`` and ``priority`` are stored as plain strings so rows written
    before enum validation existed still load.
    """
    __tablename__ = "tasks"
    # Never hand out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    description: Optional[str] = None
    status: str = Field(default=TaskStatus.TODO.value, index=True)
    priority: str = Field(default=TaskPriority.MEDIUM.value, index=True)
    # Timestamps are stored as naive UTC.
    due_date: Optional[NaiveDatetime] = None
    tags: Optional[str] = Field(default="")
    created_at: NaiveDatetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: NaiveDatetime = Field(default_factory=datetime.utcnow)
