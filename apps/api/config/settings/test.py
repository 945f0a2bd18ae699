# PATH: apps/api/config/settings/test.py
from .base import *

DEBUG = False

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

STORAGE_ENDPOINT = "http://storage.test"
STORAGE_ACCESS_KEY = "test"
STORAGE_SECRET_KEY = "test"
STORAGE_BUCKET = "forms-test"
STORAGE_PUBLIC_BASE_URL = "http://storage.test/public/forms-test"

FORMS_SURVEY_SINGLE_SUBMISSION = False

LOGGING["root"]["level"] = "WARNING"
LOGGING["loggers"]["apps"]["level"] = "WARNING"
