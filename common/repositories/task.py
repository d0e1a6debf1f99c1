import threading
from dataclasses import replace
from typing import Dict, List, Optional

from common.app_logger import logger
from common.models.task import Task


class TaskRepository:
    """
    In-memory task store.

    Records live as long as the repository object (the process, in practice).
    Ids come from a counter that is never rewound, so a deleted id is never
    handed out again. Every read and write happens under one lock.
    """

    def __init__(self):
        self._tasks: Dict[int, Task] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    def list(self) -> List[Task]:
        with self._lock:
            return [replace(task) for task in self._tasks.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_one(self, task_id: int) -> Optional[Task]:
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task else None

    def create(self, task: Task) -> Task:
        with self._lock:
            self._last_id += 1
            created = replace(task, id=self._last_id, completed=False)
            self._tasks[created.id] = created
            logger.debug("Task stored id=%s total=%s", created.id, len(self._tasks))
            return replace(created)

    def replace(self, task_id: int, task: Task) -> Optional[Task]:
        with self._lock:
            if task_id not in self._tasks:
                return None
            updated = replace(task, id=task_id)
            self._tasks[task_id] = updated
            return replace(updated)

    def delete(self, task_id: int) -> bool:
        with self._lock:
            return self._tasks.pop(task_id, None) is not None
