from .task import TaskService
