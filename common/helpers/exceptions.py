from http import HTTPStatus


class APIException(Exception):
    status_code = HTTPStatus.BAD_REQUEST

    def __init__(self, message, status_code=None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class InputValidationError(APIException):
    pass


class NotFoundError(APIException):
    status_code = HTTPStatus.NOT_FOUND


def validation_messages(exception):
    """Flatten a pydantic ``ValidationError`` into one message per error."""
    messages = []
    for error in exception.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        messages.append(f"{field}: {error['msg']}")
    return messages
