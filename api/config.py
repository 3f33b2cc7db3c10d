from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# =========================
# Config & Initialization
# =========================
BASE_DIR = os.path.dirname(os.path.abspath(__file__))     # api/
ROOT_DIR = os.path.dirname(BASE_DIR)                      # project root

# Load root .env first, then any CWD .env.
load_dotenv(os.path.join(ROOT_DIR, ".env"))
load_dotenv()

APP_NAME = os.getenv("APP_NAME", "Account Data API")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
PORT = int(os.getenv("PORT", "5050"))
DEBUG = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
FLASK_SECRET = os.getenv("FLASK_SECRET", "account_data_secret")

# Document store
DOCUMENT_STORE = os.getenv("DOCUMENT_STORE", "firestore").strip().lower()
USERS_COLLECTION = "users"
RECURSIVE_DELETE_CHUNK_SIZE = int(os.getenv("RECURSIVE_DELETE_CHUNK_SIZE", "5000"))
FIRESTORE_DELETE_MAX_ATTEMPTS = int(os.getenv("FIRESTORE_DELETE_MAX_ATTEMPTS", "5"))

# Firebase Admin. Unset credentials path means Application Default Credentials.
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID") or None
FIREBASE_CREDENTIALS_PATH = os.getenv("FIREBASE_CREDENTIALS_PATH") or None
VERIFY_TOKEN_REVOCATION = os.getenv("VERIFY_TOKEN_REVOCATION", "false").lower() in ("1", "true", "yes")

# Debug console
DEBUG_CONSOLE_ENABLED = os.getenv("DEBUG_CONSOLE_ENABLED", "false").lower() in ("1", "true", "yes")
DEBUG_EVENTS_MAX = int(os.getenv("DEBUG_EVENTS_MAX", "500"))

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(message)s",
)
log = logging.getLogger("accountdata")
