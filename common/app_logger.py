import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "study_organizer"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level="INFO", log_dir=None):
    formatter = logging.Formatter(
        "%(asctime)s %(levelname)s %(name)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Called once per app; drop handlers left by an earlier create_app().
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_path / "study_organizer.log", maxBytes=2_000_000, backupCount=3)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.setLevel(str(level).upper())
    return logger
