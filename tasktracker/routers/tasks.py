import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..display import display_options
from ..models import Task as TaskModel, TaskStatus
from ..query import aggregate_stats, apply_query, build_query, is_overdue, search_tasks
from ..schemas.task import (
    PriorityCount,
    StatusCount,
    Task as TaskSchema,
    TaskCreate,
    TaskStatsResponse,
    TaskUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def get_now() -> datetime:
    """Reference instant for overdue checks (naive UTC, like stored timestamps)."""
    return datetime.utcnow()


def _load_snapshot(db: Session) -> List[TaskModel]:
    # Natural order: most recently created first.
    return (
        db.query(TaskModel)
        .order_by(TaskModel.created_at.desc(), TaskModel.id.desc())
        .all()
    )


def _get_task_or_404(db: Session, task_id: int) -> TaskModel:
    task = db.query(TaskModel).filter(TaskModel.id == task_id).first()
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


def _to_schema(task: TaskModel, now: datetime) -> TaskSchema:
    return TaskSchema.model_validate(task).model_copy(update={"overdue": is_overdue(task, now)})


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(
    request: Request,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    sort: Optional[str] = None,
    term: Optional[str] = None,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """List tasks with optional status/priority filters, text search and sort.

    Unknown ``sort`` values fall back to natural order.
    """
    query = build_query(status=status, priority=priority, sort=sort, term=term)
    tasks = apply_query(_load_snapshot(db), query)
    logger.info("Listed %d task(s) for %s", len(tasks), query)
    return [_to_schema(task, now) for task in tasks]


@router.get("/tasks/search", response_model=List[TaskSchema])
def search_all_tasks(
    request: Request,
    term: Optional[str] = None,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Search title, description and tags across every task."""
    if not term or not term.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Search term is required")

    tasks = search_tasks(_load_snapshot(db), term)
    logger.info("Search %r matched %d task(s)", term, len(tasks))
    return [_to_schema(task, now) for task in tasks]


@router.get("/tasks/stats", response_model=TaskStatsResponse)
def get_stats(
    request: Request,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Counts by status and priority plus the number of overdue tasks."""
    stats = aggregate_stats(_load_snapshot(db), now)
    return TaskStatsResponse(
        status=[StatusCount(status=key, count=count) for key, count in stats.status.items()],
        priority=[PriorityCount(priority=key, count=count) for key, count in stats.priority.items()],
        overdue=stats.overdue,
    )


@router.get("/tasks/options")
def get_options(request: Request):
    """Labels and colors for statuses and priorities, and the sort keys."""
    return display_options()


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(
    request: Request,
    task: TaskCreate,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Create a new task."""
    db_task = TaskModel(**task.model_dump())
    db.add(db_task)
    db.commit()
    db.refresh(db_task)
    logger.info("Created task %s", db_task.id)
    return _to_schema(db_task, now)


@router.get("/tasks/{task_id}", response_model=TaskSchema)
def get_task(
    request: Request,
    task_id: int,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Get a specific task by ID."""
    return _to_schema(_get_task_or_404(db, task_id), now)


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    request: Request,
    task_id: int,
    task_update: TaskUpdate,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Replace the business fields of a task."""
    task = _get_task_or_404(db, task_id)

    for field, value in task_update.model_dump().items():
        setattr(task, field, value)

    task.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(task)
    logger.info("Updated task %s", task_id)
    return _to_schema(task, now)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    request: Request,
    task_id: int,
    db: Session = Depends(get_db),
):
    """Delete a task permanently."""
    task = _get_task_or_404(db, task_id)

    db.delete(task)
    db.commit()
    logger.info("Deleted task %s", task_id)


@router.patch("/tasks/{task_id}/complete", response_model=TaskSchema)
def mark_task_complete(
    request: Request,
    task_id: int,
    now: datetime = Depends(get_now),
    db: Session = Depends(get_db),
):
    """Mark a task as done."""
    task = _get_task_or_404(db, task_id)

    task.status = TaskStatus.DONE.value
    task.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(task)
    logger.info("Completed task %s", task_id)
    return _to_schema(task, now)
