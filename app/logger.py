from flask import got_request_exception, request
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from common.app_logger import logger
from common.helpers.exceptions import APIException

EXPECTED_EXCEPTIONS = (APIException, ValidationError, HTTPException)


def log_request_exception(sender, exception, **extra):
    if isinstance(exception, EXPECTED_EXCEPTIONS):
        logger.info("%s %s rejected: %s", request.method, request.path, exception)
        return
    logger.error(
        "Unhandled exception on %s %s",
        request.method,
        request.path,
        exc_info=(type(exception), exception, exception.__traceback__),
    )


def set_request_exception_signal(app):
    got_request_exception.connect(log_request_exception, app)
