import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
API_TIMEOUT = os.getenv("API_TIMEOUT") or None

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
