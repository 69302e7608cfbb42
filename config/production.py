import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

FIRESTORE_CONFIG = {
    "project_id": os.getenv("FIREBASE_PROJECT_ID", ""),
    # Empty path falls back to Application Default Credentials
    "credentials_path": os.getenv("GOOGLE_APPLICATION_CREDENTIALS", ""),
    "collection": os.getenv("STUDENTS_COLLECTION", "students"),
}

TIMEZONE = os.getenv("TIMEZONE") or None
CHECKOUT_TIME_FORMAT = os.getenv("CHECKOUT_TIME_FORMAT", "%I:%M:%S %p")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
