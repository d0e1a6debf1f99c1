from typing import List, Optional

from common.app_logger import logger
from common.helpers.exceptions import NotFoundError
from common.models.task import Task
from common.repositories.factory import RepositoryFactory, RepoType


class TaskService:

    def __init__(self, repository_factory: RepositoryFactory):
        self.repository_factory = repository_factory
        self.task_repo = self.repository_factory.get_repository(RepoType.TASK)

    def get_tasks(self) -> List[Task]:
        return self.task_repo.list()

    def get_task_by_id(self, task_id: int) -> Optional[Task]:
        return self.task_repo.get_one(task_id)

    def create_task(self, payload: dict) -> Task:
        task = self.task_repo.create(Task.from_payload(payload))
        logger.info("Task created id=%s due=%s", task.id, task.due_date)
        return task

    def replace_task(self, task_id: int, payload: dict) -> Task:
        task = self.task_repo.replace(task_id, Task.from_payload(payload))
        if task is None:
            logger.warning("Replace ignored, task id=%s not found", task_id)
            raise NotFoundError(f"Task {task_id} not found.")
        logger.info("Task replaced id=%s completed=%s", task.id, task.completed)
        return task

    def toggle_task(self, task_id: int) -> Task:
        task = self.get_task_by_id(task_id)
        if task is None:
            raise NotFoundError(f"Task {task_id} not found.")
        payload = task.as_dict()
        payload["completed"] = not task.completed
        return self.replace_task(task_id, payload)

    def delete_task(self, task_id: int) -> None:
        if self.task_repo.delete(task_id):
            logger.info("Task deleted id=%s", task_id)
        else:
            logger.debug("Delete ignored, task id=%s not found", task_id)
