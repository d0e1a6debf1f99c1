from app.views.dashboard import dashboard_bp
from app.views.task import task_api


def initialize_views(api):
    api.add_namespace(task_api, path='/tasks')


def initialize_blueprints(app):
    app.register_blueprint(dashboard_bp)
