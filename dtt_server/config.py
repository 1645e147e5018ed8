import os
import logging.config
from dotenv import load_dotenv
load_dotenv()

# --- Main settings ---
DEFAULT_DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./database.db")
DEFAULT_HOST = os.getenv("HOST", "0.0.0.0")
DEFAULT_PORT = int(os.getenv("PORT", 8000))
DEBUG = os.getenv("DEBUG", "0") == "1"
SEED_CATALOG = os.getenv("SEED_CATALOG", "1") == "1"

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://127.0.0.1:5500,http://localhost:5500").split(",")
    if o.strip()
]

# --- Auth ---
JWT_SECRET = os.getenv("JWT_SECRET", "dtt_catalog_dev_secret_change_me")
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_DAYS = int(os.getenv("JWT_EXPIRE_DAYS", "7"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

# --- Logging ---
LOG_FILE = os.getenv("LOG_FILE", "server.log")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    },
    "formatters": {"default": {"format": "%(asctime)s - %(levelname)s - %(message)s"}},
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
}
if LOG_FILE:
    LOGGING_CONFIG["handlers"]["file"] = {
        "class": "logging.FileHandler", "filename": LOG_FILE, "formatter": "default", "encoding": "utf-8",
    }
    LOGGING_CONFIG["root"]["handlers"].append("file")
logging.config.dictConfig(LOGGING_CONFIG)
logger = logging.getLogger("dtt_server")

# --- Pagination ---
RATING_PAGE_SIZE       = 10
COMMENT_PAGE_SIZE      = 20
NOTIFICATION_PAGE_SIZE = 20
MAX_PAGE_SIZE          = 100
REPLY_PREVIEW          = 3   # replies embedded under each top-level comment

# --- Content limits ---
USERNAME_MIN_LENGTH = 3
USERNAME_MAX_LENGTH = 30
PASSWORD_MIN_LENGTH = 6
NICKNAME_MAX_LENGTH = 30
AVATAR_MAX_LENGTH   = 500
COMMENT_MAX_LENGTH  = 500
SNIPPET_LENGTH      = 50
PASSWORD_MAX_BYTES  = 72  # bcrypt input limit

# half-star steps 0.5 .. 5
ALLOWED_SCORES = tuple(i / 2 for i in range(1, 11))
