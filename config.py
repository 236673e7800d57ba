import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("CONFIG_FILE", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./users.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    SESSION_SECRET = data.get("SESSION_SECRET", "dev-session-secret-change-in-production")
    SESSION_COOKIE_NAME = data.get("SESSION_COOKIE_NAME", "sid")
    SESSION_COOKIE_SECURE = bool(data.get("SESSION_COOKIE_SECURE", False))
    SESSION_COOKIE_SAMESITE = data.get("SESSION_COOKIE_SAMESITE", "lax")
    SESSION_TTL_SECONDS = int(data.get("SESSION_TTL_SECONDS", 86400))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    STORE_TIMEOUT_SECONDS = float(data.get("STORE_TIMEOUT_SECONDS", 10))
