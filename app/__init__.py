from flask import Flask, render_template
from flask_cors import CORS
from flask_restx import Api
from pydantic import ValidationError

from app.helpers.services import REPOSITORY_FACTORY_KEY
from common.app_config import get_config
from common.app_logger import logger as app_logger, setup_logging
from common.helpers.exceptions import APIException, InputValidationError, validation_messages
from common.repositories.factory import RepositoryFactory, RepoType
from common.utils.version import get_project_name, get_service_version
from app.logger import set_request_exception_signal

LIVENESS_MESSAGE = 'Study Organizer API running.'


def create_api():
    return Api(
        version=get_service_version(),
        title=get_project_name(),
        description="Welcome to the API documentation of the Study Organizer API",
        doc='/api-doc'
    )


def create_app(config=None):
    config = config or get_config()

    app = Flask(__name__)
    app.config.from_object(config)

    setup_logging(app.config["LOG_LEVEL"], app.config["LOG_DIR"])

    with app.app_context():
        set_request_exception_signal(app)

    # One store per app, alive for as long as the process serves it.
    repository_factory = RepositoryFactory()
    app.extensions[REPOSITORY_FACTORY_KEY] = repository_factory

    # Registered before the API so it wins over the API's own root endpoint.
    @app.route('/')
    def hello_world():
        return LIVENESS_MESSAGE, 200, {'Content-Type': 'text/plain; charset=utf-8'}

    api = create_api()

    from app.views import initialize_blueprints, initialize_views
    initialize_views(api)
    initialize_blueprints(app)

    CORS(app,
         resources={r"/*": {
             "origins": app.config["CORS_ORIGINS"],
             "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
             "allow_headers": ["Content-Type"],
             "supports_credentials": False
         }},
         supports_credentials=False,
         automatic_options=True)

    api.init_app(app)

    from app.helpers.response import get_failure_response

    @api.errorhandler(ValidationError)
    def handle_model_validation_error(exception):
        messages = validation_messages(exception)
        return get_failure_response(message='\n'.join(messages), errors=messages)

    # Checked before APIException: the first matching handler wins.
    @api.errorhandler(InputValidationError)
    def handle_input_validation_error(exception):
        return get_failure_response(message=str(exception), errors=[str(exception)])

    @api.errorhandler(APIException)
    def handle_application_error(exception):
        return get_failure_response(message=str(exception), status_code=exception.status_code)

    @app.errorhandler(ValidationError)
    def handle_page_model_validation_error(exception):
        return render_template('error.html', messages=validation_messages(exception)), 400

    @app.errorhandler(APIException)
    def handle_page_application_error(exception):
        return render_template('error.html', messages=[str(exception)]), int(exception.status_code)

    app_logger.info(
        "%s %s ready env=%s tasks=%s",
        get_project_name(),
        get_service_version(),
        app.config["APP_ENV"],
        repository_factory.get_repository(RepoType.TASK).count(),
    )
    return app
