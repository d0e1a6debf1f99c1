from enum import Enum

from common.repositories.task import TaskRepository


class RepoType(Enum):
    TASK = "task"


class RepositoryFactory:
    """Owns one repository instance per type for the lifetime of the factory.

    The application creates a single factory in ``create_app`` so the
    in-memory store lives exactly as long as the app.
    """

    _REPO_CLASSES = {
        RepoType.TASK: TaskRepository,
    }

    def __init__(self):
        self._repositories = {}

    def get_repository(self, repo_type: RepoType):
        if repo_type not in self._repositories:
            self._repositories[repo_type] = self._REPO_CLASSES[repo_type]()
        return self._repositories[repo_type]
