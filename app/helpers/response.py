from http import HTTPStatus

from flask import Response

from common.helpers.exceptions import InputValidationError


def get_success_response(data, status_code=HTTPStatus.OK):
    """Bare JSON payload: task endpoints return the record or the array itself."""
    return data, status_code


def get_no_content_response():
    return Response(status=HTTPStatus.NO_CONTENT)


def get_failure_response(message, status_code=HTTPStatus.BAD_REQUEST, errors=None):
    body = {"success": False, "message": message}
    if errors:
        body["errors"] = list(errors)
    return body, int(status_code)


def parse_request_body(request, fields):
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        raise InputValidationError("Request body must be a JSON object.")
    return {field: body[field] for field in fields if field in body}


def validate_required_fields(parsed_body, required_fields=("title",)):
    missing = [
        field for field in required_fields
        if parsed_body.get(field) is None or (isinstance(parsed_body.get(field), str) and not parsed_body[field].strip())
    ]
    if missing:
        raise InputValidationError(f"Missing required field(s): {', '.join(missing)}.")
