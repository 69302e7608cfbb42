import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

FIRESTORE_CONFIG = {
    "project_id": os.getenv("FIREBASE_PROJECT_ID", ""),
    "credentials_path": os.getenv("GOOGLE_APPLICATION_CREDENTIALS", "firebase_service_account.json"),
    "collection": os.getenv("STUDENTS_COLLECTION", "students"),
}

# IANA zone for checkout stamps, empty means server local time
TIMEZONE = os.getenv("TIMEZONE") or None
CHECKOUT_TIME_FORMAT = os.getenv("CHECKOUT_TIME_FORMAT", "%I:%M:%S %p")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
