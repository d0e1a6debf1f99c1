from dataclasses import dataclass
from datetime import date
from typing import List, Optional, Sequence

from common.helpers.dates import days_left, parse_due_date
from common.models.task import Task
from common.services.view_model import TaskStatus, task_status

STATUS_STYLES = {
    TaskStatus.COMPLETED: {
        "badge": "bg-emerald-500/15 text-emerald-200",
        "border": "border-emerald-400/40",
    },
    TaskStatus.OVERDUE: {
        "badge": "bg-rose-500/15 text-rose-200",
        "border": "border-rose-400/30",
    },
    TaskStatus.DUE_SOON: {
        "badge": "bg-amber-500/15 text-amber-200",
        "border": "border-amber-400/30",
    },
    TaskStatus.PENDING: {
        "badge": "bg-indigo-500/15 text-indigo-200",
        "border": "border-indigo-400/30",
    },
}

NO_DESCRIPTION = "No description"
NO_DUE_DATE = "No due date"


@dataclass(frozen=True)
class TaskCard:
    task: Task
    status: TaskStatus
    badge_classes: str
    border_classes: str
    due_caption: str


def format_date(value) -> str:
    due = parse_due_date(value)
    if due is None:
        return "Invalid date" if value else "No date"
    return f"{due:%a}, {due:%b} {due.day}"


def format_days_left(days: int) -> str:
    if days < 0:
        return f"Overdue by {abs(days)}d"
    if days == 0:
        return "Due today"
    if days == 1:
        return "Due tomorrow"
    return f"{days} days left"


def due_caption(task: Task, today: Optional[date] = None) -> str:
    if not task.due_date:
        return NO_DUE_DATE
    days = days_left(task.due_date, today)
    if days is None:
        return format_date(task.due_date)
    return f"{format_date(task.due_date)} · {format_days_left(days)}"


def build_card(task: Task, today: Optional[date] = None, due_soon_days: int = 3) -> TaskCard:
    status = task_status(task, today, due_soon_days)
    style = STATUS_STYLES[status]
    return TaskCard(
        task=task,
        status=status,
        badge_classes=style["badge"],
        border_classes=style["border"],
        due_caption=due_caption(task, today),
    )


def build_cards(tasks: Sequence[Task], today: Optional[date] = None, due_soon_days: int = 3) -> List[TaskCard]:
    return [build_card(task, today, due_soon_days) for task in tasks]


def find_editing_task(tasks: Sequence[Task], editing_id) -> Optional[Task]:
    """Resolve the open edit session against the freshly loaded collection."""
    try:
        editing_id = int(editing_id)
    except (TypeError, ValueError):
        return None
    return next((task for task in tasks if task.id == editing_id), None)
