"""Tests for the server-rendered list view and dashboard."""
import re
from datetime import date, timedelta

from app.helpers.render import due_caption, find_editing_task, format_days_left
from common.models.task import Task

CSRF_PATTERN = re.compile(r'name="csrf_token" type="hidden" value="([^"]+)"')


def csrf_token(client, path="/dashboard"):
    html = client.get(path).get_data(as_text=True)
    return CSRF_PATTERN.search(html).group(1)


def post(client, url, data=None, page="/dashboard"):
    form = dict(data or {})
    form["csrf_token"] = csrf_token(client, page)
    return client.post(url, data=form)


def add(client, title, description="", due=""):
    return post(client, "/dashboard/tasks", {"title": title, "description": description, "due_date": due})


class TestRenderHelpers:

    def test_days_left_captions(self):
        assert format_days_left(-2) == "Overdue by 2d"
        assert format_days_left(0) == "Due today"
        assert format_days_left(1) == "Due tomorrow"
        assert format_days_left(5) == "5 days left"

    def test_due_caption(self):
        today = date(2026, 10, 19)
        assert due_caption(Task(title="x"), today) == "No due date"
        assert due_caption(Task(title="x", due_date=date(2026, 10, 20)), today) == "Tue, Oct 20 · Due tomorrow"

    def test_editing_task_is_resolved_by_id(self):
        tasks = [Task(id=1, title="a"), Task(id=2, title="b")]
        assert find_editing_task(tasks, "2").title == "b"
        assert find_editing_task(tasks, "9") is None
        assert find_editing_task(tasks, "abc") is None
        assert find_editing_task(tasks, None) is None


class TestDashboard:

    def test_empty_dashboard(self, client):
        resp = client.get("/dashboard")

        assert resp.status_code == 200
        html = resp.get_data(as_text=True)
        assert "No tasks match the current filters." in html
        assert "No tasks with a due date yet." in html
        assert 'id="progressValue" class="text-2xl font-semibold">0%' in html

    def test_task_due_today_scenario(self, client):
        resp = add(client, "Read ch.3", due=date.today().isoformat())
        assert resp.status_code == 302

        html = client.get("/dashboard").get_data(as_text=True)
        assert "Read ch.3" in html
        assert '<p class="timeline-status text-xs text-indigo-300 mt-2">Today</p>' in html
        assert ">Due soon</span>" in html
        assert "Due today" in html

    def test_title_is_escaped(self, client):
        add(client, "<script>alert('x')</script>", description="<b>bold</b>")

        html = client.get("/dashboard").get_data(as_text=True)
        assert "<script>alert(" not in html
        assert "&lt;script&gt;alert(" in html
        assert "<b>bold</b>" not in html

        list_html = client.get("/list").get_data(as_text=True)
        assert "<script>alert(" not in list_html

    def test_filter_and_search(self, client, task_service):
        task_service.create_task({"title": "Essay draft"})
        done = task_service.create_task({"title": "Math homework"})
        task_service.toggle_task(done.id)

        pending_html = client.get("/dashboard?filter=pending").get_data(as_text=True)
        assert "Essay draft" in pending_html
        assert "Math homework" not in pending_html.split('id="taskList"')[1].split('id="timelineList"')[0]

        search_html = client.get("/dashboard?search=MATH").get_data(as_text=True)
        task_list = search_html.split('id="taskList"')[1].split('id="timelineList"')[0]
        assert "Math homework" in task_list
        assert "Essay draft" not in task_list

    def test_search_term_keeps_trailing_whitespace(self, client, task_service):
        task_service.create_task({"title": "Essay draft"})
        task_service.create_task({"title": "Read Essay"})

        html = client.get("/dashboard", query_string={"search": "essay "}).get_data(as_text=True)
        task_list = html.split('id="taskList"')[1].split('id="timelineList"')[0]
        assert "Essay draft" in task_list
        assert "Read Essay" not in task_list

    def test_toggle_twice_restores_completion(self, client, task_service):
        task = task_service.create_task({"title": "Flip"})

        post(client, f"/dashboard/tasks/{task.id}/toggle")
        assert task_service.get_task_by_id(task.id).completed is True
        post(client, f"/dashboard/tasks/{task.id}/toggle")
        assert task_service.get_task_by_id(task.id).completed is False

    def test_edit_modal_opens_for_one_task(self, client, task_service):
        task = task_service.create_task({"title": "Edit me", "dueDate": "2026-12-01"})

        html = client.get(f"/dashboard?edit={task.id}").get_data(as_text=True)
        assert 'id="editModal"' in html
        assert 'value="Edit me"' in html
        assert 'value="2026-12-01"' in html

        assert 'id="editModal"' not in client.get("/dashboard?edit=404").get_data(as_text=True)

    def test_edit_keeps_completion_and_replaces_fields(self, client, task_service):
        task = task_service.create_task({"title": "Old", "description": "keep?", "dueDate": "2026-12-01"})
        task_service.toggle_task(task.id)

        resp = post(
            client,
            f"/dashboard/tasks/{task.id}/edit",
            {"title": "New", "description": "", "due_date": "", "filter": "completed"},
        )

        assert resp.status_code == 302
        assert resp.headers["Location"].endswith("/dashboard?filter=completed")
        updated = task_service.get_task_by_id(task.id)
        assert (updated.title, updated.description, updated.due_date, updated.completed) == ("New", "", None, True)

    def test_invalid_form_is_flashed_and_not_stored(self, client, task_service):
        resp = add(client, "   ")

        assert resp.status_code == 302
        assert task_service.get_tasks() == []
        html = client.get("/dashboard").get_data(as_text=True)
        assert "Title: This field is required." in html

    def test_malformed_due_date_is_flashed(self, client, task_service):
        add(client, "Essay", due="next tuesday")

        assert task_service.get_tasks() == []
        assert "Due Date: Not a valid date value." in client.get("/dashboard").get_data(as_text=True)

    def test_delete(self, client, task_service):
        task = task_service.create_task({"title": "Bye"})

        post(client, f"/dashboard/tasks/{task.id}/delete")
        post(client, "/dashboard/tasks/999/delete")

        assert task_service.get_tasks() == []

    def test_stats_and_chart_data(self, client, task_service):
        due = (date.today() + timedelta(days=10)).isoformat()
        task_service.create_task({"title": "One", "dueDate": due})
        task_service.create_task({"title": "Two", "dueDate": due})

        html = client.get("/dashboard").get_data(as_text=True)
        assert 'id="totalTasks" class="text-2xl font-semibold">2<' in html
        assert f'"labels": ["{due}"]' in html
        assert '"data": [2]' in html


class TestCsrf:

    def test_every_form_carries_a_token(self, client, task_service):
        task = task_service.create_task({"title": "Guarded"})

        html = client.get(f"/dashboard?edit={task.id}").get_data(as_text=True)
        # create, toggle, delete and edit
        assert len(CSRF_PATTERN.findall(html)) == 4
        assert len(CSRF_PATTERN.findall(client.get("/list").get_data(as_text=True))) == 2

    def test_cross_site_create_without_token_is_rejected(self, client, task_service):
        headers = {"Origin": "https://evil.example"}

        client.post("/dashboard/tasks", data={"title": "forged"}, headers=headers)
        client.post("/list/tasks", data={"title": "forged"}, headers=headers)

        assert task_service.get_tasks() == []
        assert "CSRF token is missing." in client.get("/dashboard").get_data(as_text=True)

    def test_state_changes_without_token_are_rejected(self, client, task_service):
        task = task_service.create_task({"title": "Keep", "description": "as is"})

        client.post(f"/dashboard/tasks/{task.id}/toggle")
        client.post(f"/dashboard/tasks/{task.id}/edit", data={"title": "hijacked"})
        client.post(f"/dashboard/tasks/{task.id}/delete")
        client.post(f"/list/tasks/{task.id}/delete")

        assert task_service.get_tasks() == [task]

    def test_json_api_is_not_subject_to_csrf(self, client):
        resp = client.post("/tasks", json={"title": "From the API"})

        assert resp.status_code == 201


class TestBasicList:

    def test_add_and_delete(self, client, task_service):
        post(client, "/list/tasks", {"title": "Plain", "description": "row", "due_date": "2026-10-30"}, page="/list")

        html = client.get("/list").get_data(as_text=True)
        assert "<strong>Plain</strong> – row" in html
        assert "Due: 2026-10-30" in html

        task = task_service.get_tasks()[0]
        post(client, f"/list/tasks/{task.id}/delete", page="/list")
        assert task_service.get_tasks() == []
