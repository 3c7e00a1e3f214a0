API_TOKEN = "test-token"
ADMIN_PASSWORD = "test-admin"

DATA_DIR = "data"
STORAGE_BACKEND = "memory"

JSON_MAX_BYTES = 1024 * 1024

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
