from flask import current_app

from common.services import TaskService

REPOSITORY_FACTORY_KEY = "repository_factory"


def get_task_service():
    return TaskService(current_app.extensions[REPOSITORY_FACTORY_KEY])
