from datetime import date

from flask import Blueprint, current_app, flash, redirect, render_template, request, url_for
from pydantic import ValidationError

from app.forms import ActionForm, TaskForm
from app.helpers.render import build_cards, find_editing_task
from app.helpers.services import get_task_service
from common.app_logger import logger
from common.helpers.exceptions import APIException, validation_messages
from common.services.view_model import (
    TaskFilter, build_timeline, completion_chart, compute_stats, velocity_chart, visible_tasks
)

dashboard_bp = Blueprint('dashboard', __name__)


def _view_state():
    return {
        "filter": TaskFilter.parse(request.values.get("filter")).value,
        "search": request.values.get("search", ""),
    }


def _back_to_dashboard():
    state = {key: value for key, value in _view_state().items() if value and value != TaskFilter.ALL.value}
    return redirect(url_for('dashboard.dashboard', **state))


def _flash_form_errors(form):
    for field_name, messages in form.errors.items():
        label = form[field_name].label.text if field_name in form else field_name
        for message in messages:
            flash(f'{label}: {message}', 'danger')


def _flash_error(exception):
    if isinstance(exception, ValidationError):
        for message in validation_messages(exception):
            flash(message, 'danger')
    else:
        flash(str(exception), 'danger')


# ---- basic list view ----

@dashboard_bp.route('/list')
def task_list():
    tasks = get_task_service().get_tasks()
    return render_template('list.html', tasks=tasks, form=TaskForm(), action_form=ActionForm())


@dashboard_bp.route('/list/tasks', methods=['POST'])
def list_create_task():
    form = TaskForm()
    if form.validate_on_submit():
        try:
            get_task_service().create_task(form.to_payload())
        except (ValidationError, APIException) as e:
            _flash_error(e)
    else:
        _flash_form_errors(form)
    return redirect(url_for('dashboard.task_list'))


@dashboard_bp.route('/list/tasks/<int:task_id>/delete', methods=['POST'])
def list_delete_task(task_id):
    form = ActionForm()
    if form.validate_on_submit():
        get_task_service().delete_task(task_id)
    else:
        _flash_form_errors(form)
    return redirect(url_for('dashboard.task_list'))


# ---- dashboard ----

@dashboard_bp.route('/dashboard')
def dashboard():
    today = date.today()
    tasks = get_task_service().get_tasks()
    state = _view_state()
    due_soon_days = current_app.config["DUE_SOON_DAYS"]

    editing_task = find_editing_task(tasks, request.args.get("edit"))
    if request.args.get("edit") and editing_task is None:
        logger.debug("Edit requested for unknown task id=%s", request.args.get("edit"))

    return render_template(
        'dashboard.html',
        stats=compute_stats(tasks),
        cards=build_cards(visible_tasks(tasks, state["filter"], state["search"]), today, due_soon_days),
        timeline=build_timeline(tasks, today, current_app.config["TIMELINE_LIMIT"]),
        completion_chart=completion_chart(tasks),
        velocity_chart=velocity_chart(tasks),
        filters=[task_filter.value for task_filter in TaskFilter],
        current_filter=state["filter"],
        search=state["search"],
        form=TaskForm(formdata=None),
        action_form=ActionForm(),
        editing_task=editing_task,
        edit_form=TaskForm(formdata=None, obj=editing_task) if editing_task else None,
    )


@dashboard_bp.route('/dashboard/tasks', methods=['POST'])
def create_task():
    form = TaskForm()
    if form.validate_on_submit():
        try:
            get_task_service().create_task(form.to_payload())
            flash('Task created!', 'success')
        except (ValidationError, APIException) as e:
            _flash_error(e)
    else:
        _flash_form_errors(form)
    return _back_to_dashboard()


@dashboard_bp.route('/dashboard/tasks/<int:task_id>/toggle', methods=['POST'])
def toggle_task(task_id):
    form = ActionForm()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return _back_to_dashboard()
    try:
        get_task_service().toggle_task(task_id)
    except APIException as e:
        _flash_error(e)
    return _back_to_dashboard()


@dashboard_bp.route('/dashboard/tasks/<int:task_id>/edit', methods=['POST'])
def edit_task(task_id):
    task_service = get_task_service()
    task = task_service.get_task_by_id(task_id)
    if not task:
        flash(f'Task {task_id} not found.', 'danger')
        return _back_to_dashboard()

    form = TaskForm()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return _back_to_dashboard()

    payload = task.as_dict()
    payload.update(form.to_payload())
    try:
        task_service.replace_task(task_id, payload)
        flash('Task updated!', 'success')
    except (ValidationError, APIException) as e:
        _flash_error(e)
    return _back_to_dashboard()


@dashboard_bp.route('/dashboard/tasks/<int:task_id>/delete', methods=['POST'])
def delete_task(task_id):
    form = ActionForm()
    if not form.validate_on_submit():
        _flash_form_errors(form)
        return _back_to_dashboard()
    get_task_service().delete_task(task_id)
    flash('Task deleted.', 'success')
    return _back_to_dashboard()
