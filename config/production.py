import os
from pathlib import Path

API_TOKEN = os.getenv("API_TOKEN", "institute_api_token_2024_soran")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")

DATA_DIR = os.getenv("DATA_DIR", str(Path(__file__).resolve().parents[1] / "data"))
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "file")

JSON_MAX_BYTES = int(os.getenv("JSON_MAX_BYTES", str(50 * 1024 * 1024)))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
