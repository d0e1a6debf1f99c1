from importlib.metadata import PackageNotFoundError, version

DISTRIBUTION_NAME = "study-organizer"
PROJECT_NAME = "Study Organizer API"


def get_service_version():
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        return "0.0.0"


def get_project_name():
    return PROJECT_NAME
