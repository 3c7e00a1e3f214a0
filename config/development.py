import os
from pathlib import Path

# Static bearer token shared with the teacher system.
API_TOKEN = os.getenv("API_TOKEN", "institute_api_token_2024_soran")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

DATA_DIR = os.getenv("DATA_DIR", str(Path(__file__).resolve().parents[1] / "data"))
# "file" (JSON files under DATA_DIR) or "memory"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")

# Request body cap; backups from the teacher system can be large.
JSON_MAX_BYTES = int(os.getenv("JSON_MAX_BYTES", str(50 * 1024 * 1024)))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
