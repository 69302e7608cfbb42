SECRET_KEY = "test-secret"

FIRESTORE_CONFIG = {
    "project_id": "test-project",
    "credentials_path": "",
    "collection": "students",
}

TIMEZONE = None
CHECKOUT_TIME_FORMAT = "%H:%M:%S"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
