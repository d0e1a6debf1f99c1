from .factory import RepositoryFactory, RepoType
from .task import TaskRepository
