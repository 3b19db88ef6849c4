SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

# Never push to a real sheet from tests
SHEETS_WEBHOOK_URL = ""
SYNC_TIMEOUT_SECONDS = 1.0

SEED_SAMPLE_DATA = False
