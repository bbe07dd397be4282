import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    SERVICE_NAME = "site-content-api"

    # Key-value store
    KV_URL = os.getenv("KV_URL")
    KV_REST_API_TOKEN = os.getenv("KV_REST_API_TOKEN")
    KV_SOCKET_TIMEOUT = float(os.getenv("KV_SOCKET_TIMEOUT", "5"))

    # Content history
    HISTORY_MAX_ENTRIES = int(os.getenv("HISTORY_MAX_ENTRIES", "10"))
    HISTORY_TTL_SECONDS = int(os.getenv("HISTORY_TTL_SECONDS", str(60 * 60 * 24 * 30)))
    HISTORY_PRUNE_EVICTED = _env_bool("HISTORY_PRUNE_EVICTED", True)

    # Initial admin account for /api/setup
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD")

    # JWT session cookie
    JWT_SECRET_KEY = os.getenv("JWT_SECRET", "dev-jwt-secret")
    JWT_TOKEN_LOCATION = ["cookies"]
    JWT_ACCESS_COOKIE_NAME = "auth_token"
    JWT_ACCESS_COOKIE_PATH = "/"
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=7)
    JWT_COOKIE_SAMESITE = "Strict"
    JWT_COOKIE_SECURE = True
    JWT_COOKIE_CSRF_PROTECT = False
    JWT_SESSION_COOKIE = False


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
    JWT_COOKIE_SECURE = False


class ProductionConfig(BaseConfig):
    DEBUG = False
    # No fallback: create_app refuses to start without a real secret.
    JWT_SECRET_KEY = os.getenv("JWT_SECRET")


class TestingConfig(BaseConfig):
    TESTING = True
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    JWT_COOKIE_SECURE = False
    KV_URL = None
    KV_REST_API_TOKEN = None
    ADMIN_USERNAME = "admin"
    ADMIN_PASSWORD = "correct-horse-battery"
    HISTORY_MAX_ENTRIES = 10
    HISTORY_PRUNE_EVICTED = True


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
