import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def load_env():
    env_name = os.getenv("APP_ENV", "development")
    candidates = [Path.cwd(), PROJECT_ROOT]
    for base in candidates:
        env_path = base / ".env"
        if env_path.exists():
            load_dotenv(env_path)
            break

    for base in candidates:
        env_specific = base / f".env.{env_name}"
        if env_specific.exists():
            load_dotenv(env_specific, override=True)
            break


load_env()


def _env_int(name, default):
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class BaseConfig:
    APP_ENV = "development"
    DEBUG = False
    TESTING = False

    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = _env_int("PORT", 8080)

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "").strip() or None

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    # Dashboard tuning
    TIMELINE_LIMIT = _env_int("TIMELINE_LIMIT", 6)
    DUE_SOON_DAYS = _env_int("DUE_SOON_DAYS", 3)

    RESTX_MASK_SWAGGER = False
    RESTX_ERROR_404_HELP = False


class DevelopmentConfig(BaseConfig):
    DEBUG = True


class ProductionConfig(BaseConfig):
    APP_ENV = "production"


class TestConfig(BaseConfig):
    APP_ENV = "test"
    TESTING = True
    LOG_DIR = None
    SECRET_KEY = "test-secret-key"


CONFIGS = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "test": TestConfig,
}


def get_config(env_name=None):
    env_name = (env_name or os.getenv("APP_ENV", "development")).strip().lower()
    try:
        return CONFIGS[env_name]
    except KeyError:
        raise RuntimeError(f"Unknown APP_ENV '{env_name}'. Expected one of: {', '.join(CONFIGS)}.")
