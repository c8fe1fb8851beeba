from pathlib import Path
from decouple import config, Csv
from typing import List

BASE_DIR = Path(__file__).resolve().parent.parent

# Environment
ENVIRONMENT = config("ENVIRONMENT", default="development")

# Data sources
DATA_SOURCE = config("DATA_SOURCE", default="json")  # "json" or "database"
TESTIMONIES_DATA_FILE = config("TESTIMONIES_DATA_FILE", default=str(BASE_DIR / "data" / "testimonies.json"))
CHAPTERS_DATA_FILE = config("CHAPTERS_DATA_FILE", default=str(BASE_DIR / "data" / "chapters.json"))
STRICT_CORPUS_VALIDATION = config("STRICT_CORPUS_VALIDATION", default=False, cast=bool)

# Database
DATABASE_URL = config("DATABASE_URL", default="sqlite+aiosqlite:///./memorial.db")
DATABASE_ECHO = config("DATABASE_ECHO", default=False, cast=bool)
REDIS_URL = config("REDIS_URL", default="redis://localhost:6379/0")
CACHE_PREFIX = config("CACHE_PREFIX", default="memorial")

# Application settings
APP_NAME = config("APP_NAME", default="Tony Memorial")
APP_VERSION = config("APP_VERSION", default="0.1.0")
API_PREFIX = config("API_PREFIX", default="/api")
DEBUG = config("DEBUG", default=False, cast=bool)

# CORS Settings
CORS_ORIGINS = config("CORS_ORIGINS", default="http://localhost:3000").split(",")
CORS_METHODS = config("CORS_METHODS", default="GET,OPTIONS").split(",")
CORS_HEADERS = config("CORS_HEADERS", default="Content-Type,Accept").split(",")

# Logging Settings
LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_DIR = config("LOG_DIR", default="logs")
ACTIVITY_LOG_MAX_SIZE_MB = config("ACTIVITY_LOG_MAX_SIZE_MB", default=10, cast=int)
ACTIVITY_LOG_ROTATION = config("ACTIVITY_LOG_ROTATION", default="midnight")
ERROR_LOG_MAX_SIZE_MB = config("ERROR_LOG_MAX_SIZE_MB", default=10, cast=int)
ERROR_LOG_ROTATION = config("ERROR_LOG_ROTATION", default="midnight")

# Search Settings
SEARCH_THRESHOLD = config("SEARCH_THRESHOLD", default=0.4, cast=float)
SEARCH_MIN_MATCH_CHAR_LENGTH = config("SEARCH_MIN_MATCH_CHAR_LENGTH", default=2, cast=int)
DEFAULT_PAGE_SIZE = config("DEFAULT_PAGE_SIZE", default=25, cast=int)
DEFAULT_PREVIEW_LENGTH = config("DEFAULT_PREVIEW_LENGTH", default=200, cast=int)

# Homepage selection, in display order
FEATURED_TESTIMONY_IDS = config(
    "FEATURED_TESTIMONY_IDS",
    default="foreword,hum-do-humare-char,letter-from-son-to-son,mere-papa-with-love,dear-papa-soumya,meethi-reet",
    cast=Csv()
)

# Images
IMAGE_BASE_PATH = config("IMAGE_BASE_PATH", default="/images/testimonies/")

# Settings class for FastAPI
class Settings:
    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    api_prefix: str = API_PREFIX
    debug: bool = DEBUG
    environment: str = ENVIRONMENT
    data_source: str = DATA_SOURCE
    testimonies_data_file: str = TESTIMONIES_DATA_FILE
    chapters_data_file: str = CHAPTERS_DATA_FILE
    strict_corpus_validation: bool = STRICT_CORPUS_VALIDATION
    database_url: str = DATABASE_URL
    database_echo: bool = DATABASE_ECHO
    redis_url: str = REDIS_URL
    cache_prefix: str = CACHE_PREFIX
    cors_origins: List[str] = CORS_ORIGINS
    cors_methods: List[str] = CORS_METHODS
    cors_headers: List[str] = CORS_HEADERS
    log_level: str = LOG_LEVEL
    log_dir: str = LOG_DIR
    search_threshold: float = SEARCH_THRESHOLD
    search_min_match_char_length: int = SEARCH_MIN_MATCH_CHAR_LENGTH
    default_page_size: int = DEFAULT_PAGE_SIZE
    default_preview_length: int = DEFAULT_PREVIEW_LENGTH
    featured_testimony_ids: List[str] = FEATURED_TESTIMONY_IDS
    image_base_path: str = IMAGE_BASE_PATH

# Create settings instance
settings = Settings()
