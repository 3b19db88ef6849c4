import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Google Apps Script web app that writes snapshots into the sheet; empty disables sync
SHEETS_WEBHOOK_URL = os.getenv("GOOGLE_SHEETS_WEBHOOK_URL", "")
SYNC_TIMEOUT_SECONDS = float(os.getenv("SYNC_TIMEOUT_SECONDS", "10"))

# Load the demo roster (5 volunteers, 3 employees) on startup
SEED_SAMPLE_DATA = bool(int(os.getenv("SEED_SAMPLE_DATA", "1")))
