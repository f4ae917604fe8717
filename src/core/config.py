from decouple import config
from typing import List

# Environment
ENVIRONMENT = config("ENVIRONMENT", default="development")

# Application settings
APP_NAME = config("APP_NAME", default="Wiki")
APP_VERSION = config("APP_VERSION", default="0.1.0")
API_PREFIX = config("API_PREFIX", default="/api")
DEBUG = config("DEBUG", default=False, cast=bool)

# Content Settings
CONTENT_DIR = config("CONTENT_DIR", default="content")
INCLUDE_DRAFTS = config("INCLUDE_DRAFTS", default=False, cast=bool)

# CORS Settings
CORS_ORIGINS = config("CORS_ORIGINS", default="http://localhost:3000").split(",")
CORS_METHODS = config("CORS_METHODS", default="GET,OPTIONS").split(",")
CORS_HEADERS = config("CORS_HEADERS", default="Content-Type,Accept,X-Requested-With").split(",")

# Logging Settings
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_DIR = config("LOG_DIR", default="logs")
ACTIVITY_LOG_MAX_SIZE_MB = config("ACTIVITY_LOG_MAX_SIZE_MB", default=10, cast=int)
ACTIVITY_LOG_ROTATION = config("ACTIVITY_LOG_ROTATION", default="midnight")
ERROR_LOG_MAX_SIZE_MB = config("ERROR_LOG_MAX_SIZE_MB", default=10, cast=int)
ERROR_LOG_ROTATION = config("ERROR_LOG_ROTATION", default="midnight")

# Paths that are not worth an activity log entry
LOG_SKIP_PATHS = [
    "/docs",
    "/redoc",
    "/openapi.json",
    "/health",
]

# Settings class for FastAPI
class Settings:
    environment: str = ENVIRONMENT
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    api_prefix: str = API_PREFIX
    debug: bool = DEBUG
    content_dir: str = CONTENT_DIR
    include_drafts: bool = INCLUDE_DRAFTS
    cors_origins: List[str] = CORS_ORIGINS
    cors_methods: List[str] = CORS_METHODS
    cors_headers: List[str] = CORS_HEADERS
    log_level: str = LOG_LEVEL
    log_dir: str = LOG_DIR
    activity_log_max_size_mb: int = ACTIVITY_LOG_MAX_SIZE_MB
    activity_log_rotation: str = ACTIVITY_LOG_ROTATION
    error_log_max_size_mb: int = ERROR_LOG_MAX_SIZE_MB
    error_log_rotation: str = ERROR_LOG_ROTATION
    log_skip_paths: List[str] = LOG_SKIP_PATHS

# Create settings instance
settings = Settings()
