import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./stocktalk.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get(
        "CORS_ORIGINS",
        [
            "https://stocktalk.pages.dev",
            "http://localhost:5000",
            "http://localhost:3000",
        ],
    )
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SECURITY_HEADERS = bool(data.get("ENABLE_SECURITY_HEADERS", 1))
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    TOKEN_EXPIRY_HOURS = data.get("TOKEN_EXPIRY_HOURS", 24)
    BCRYPT_ROUNDS = data.get("BCRYPT_ROUNDS", 12)
    RATE_LIMIT_WINDOW_SECONDS = data.get("RATE_LIMIT_WINDOW_SECONDS", 60)
    RATE_LIMIT_MAX_REQUESTS = data.get("RATE_LIMIT_MAX_REQUESTS", 100)
    # e.g. "X-Forwarded-For" when running behind a reverse proxy
    CLIENT_IP_HEADER = data.get("CLIENT_IP_HEADER", "")
