from http import HTTPStatus

from flask import request
from flask_restx import Namespace, Resource

from app.helpers.response import (
    get_no_content_response, get_success_response, parse_request_body, validate_required_fields
)
from app.helpers.services import get_task_service
from common.helpers.exceptions import NotFoundError
from common.models.task import Task

task_api = Namespace('tasks', description="Task-related APIs")


@task_api.route('')
class Tasks(Resource):
    def get(self):
        tasks = get_task_service().get_tasks()
        return get_success_response([task.as_dict() for task in tasks])

    def post(self):
        parsed_body = parse_request_body(request, Task.FIELD_NAMES)
        validate_required_fields(parsed_body)

        task = get_task_service().create_task(parsed_body)
        return get_success_response(task.as_dict(), HTTPStatus.CREATED)


@task_api.route('/<int:task_id>')
class TaskDetail(Resource):
    def get(self, task_id):
        task = get_task_service().get_task_by_id(task_id)
        if not task:
            raise NotFoundError(f"Task {task_id} not found.")
        return get_success_response(task.as_dict())

    def put(self, task_id):
        parsed_body = parse_request_body(request, Task.FIELD_NAMES)
        validate_required_fields(parsed_body)

        task = get_task_service().replace_task(task_id, parsed_body)
        return get_success_response(task.as_dict())

    def delete(self, task_id):
        get_task_service().delete_task(task_id)
        return get_no_content_response()
