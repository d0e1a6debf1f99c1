from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, str, None]


def parse_due_date(value: DateLike) -> Optional[date]:
    """Best-effort conversion of a due date to a ``date``.

    Accepts ``date``/``datetime`` objects and ISO strings (``YYYY-MM-DD``,
    optionally followed by a time part). Anything else yields ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def days_left(due_date: DateLike, today: Optional[date] = None) -> Optional[int]:
    due = parse_due_date(due_date)
    if due is None:
        return None
    today = today or date.today()
    return (due - today).days
