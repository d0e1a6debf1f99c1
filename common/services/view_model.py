"""Derived views over the full task collection.

Every function here is pure: it takes the collection (plus filter state,
search term and "today") and returns a new projection. Nothing is cached;
pages call these after each full reload.
"""
from collections import Counter
from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence

from common.helpers.dates import days_left, parse_due_date
from common.models.task import Task

DEFAULT_DUE_SOON_DAYS = 3
DEFAULT_TIMELINE_LIMIT = 6


class TaskFilter(str, Enum):
    ALL = "all"
    COMPLETED = "completed"
    PENDING = "pending"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TaskFilter":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.ALL


class TaskStatus(str, Enum):
    COMPLETED = "Completed"
    OVERDUE = "Overdue"
    DUE_SOON = "Due soon"
    PENDING = "Pending"


@dataclass(frozen=True)
class TaskStats:
    total: int
    completed: int
    pending: int
    percentage: int


@dataclass(frozen=True)
class TimelineEntry:
    task: Task
    due_date: date
    days_left: int
    label: str


def matches_filter(task: Task, task_filter: TaskFilter) -> bool:
    if task_filter is TaskFilter.COMPLETED:
        return task.completed
    if task_filter is TaskFilter.PENDING:
        return not task.completed
    return True


def matches_search(task: Task, search: Optional[str]) -> bool:
    term = (search or "").lower()
    if not term:
        return True
    content = f"{task.title or ''} {task.description or ''}".lower()
    return term in content


def sort_key(task: Task):
    """Incomplete first, then dated before undated, then date or title."""
    due = parse_due_date(task.due_date)
    if due is not None:
        # Dated ties keep their input order (sorted() is stable).
        return (task.completed, 0, due, "", "")
    title = task.title or ""
    return (task.completed, 1, date.min, title.casefold(), title)


def sort_tasks(tasks: Iterable[Task]) -> List[Task]:
    return sorted(tasks, key=sort_key)


def visible_tasks(tasks: Iterable[Task], task_filter=TaskFilter.ALL, search: Optional[str] = None) -> List[Task]:
    task_filter = task_filter if isinstance(task_filter, TaskFilter) else TaskFilter.parse(task_filter)
    selected = (task for task in tasks if matches_filter(task, task_filter) and matches_search(task, search))
    return sort_tasks(selected)


def task_status(task: Task, today: Optional[date] = None, due_soon_days: int = DEFAULT_DUE_SOON_DAYS) -> TaskStatus:
    if task.completed:
        return TaskStatus.COMPLETED
    days = days_left(task.due_date, today)
    if days is None:
        return TaskStatus.PENDING
    if days < 0:
        return TaskStatus.OVERDUE
    if days <= due_soon_days:
        return TaskStatus.DUE_SOON
    return TaskStatus.PENDING


def _percentage(part: int, whole: int) -> int:
    if not whole:
        return 0
    ratio = Decimal(part * 100) / Decimal(whole)
    return int(ratio.quantize(Decimal(1), rounding=ROUND_HALF_UP))


def compute_stats(tasks: Sequence[Task]) -> TaskStats:
    total = len(tasks)
    completed = sum(1 for task in tasks if task.completed)
    return TaskStats(
        total=total,
        completed=completed,
        pending=total - completed,
        percentage=_percentage(completed, total),
    )


def timeline_label(days: int) -> str:
    if days < 0:
        return "Overdue"
    if days == 0:
        return "Today"
    return f"{days} days"


def build_timeline(tasks: Iterable[Task], today: Optional[date] = None,
                   limit: int = DEFAULT_TIMELINE_LIMIT) -> List[TimelineEntry]:
    today = today or date.today()
    dated = [(parse_due_date(task.due_date), task) for task in tasks]
    dated = sorted((pair for pair in dated if pair[0] is not None), key=lambda pair: pair[0])

    entries = []
    for due, task in dated[:limit]:
        days = (due - today).days
        entries.append(TimelineEntry(task=task, due_date=due, days_left=days, label=timeline_label(days)))
    return entries


def completion_chart(tasks: Sequence[Task]) -> Dict[str, list]:
    stats = compute_stats(tasks)
    return {
        "labels": [TaskStatus.COMPLETED.value, TaskStatus.PENDING.value],
        "data": [stats.completed, stats.pending],
    }


def due_date_histogram(tasks: Iterable[Task]) -> List[tuple]:
    counts = Counter(due for due in (parse_due_date(task.due_date) for task in tasks) if due is not None)
    return sorted(counts.items())


def velocity_chart(tasks: Iterable[Task]) -> Dict[str, list]:
    histogram = due_date_histogram(tasks)
    return {
        "labels": [due.isoformat() for due, _ in histogram],
        "data": [count for _, count in histogram],
    }
