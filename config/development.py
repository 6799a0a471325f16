import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Base URL of the EMS REST API
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
# Seconds; empty means requests wait indefinitely
API_TIMEOUT = os.getenv("API_TIMEOUT") or None

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Lifetime of the persisted credential cookie
SESSION_DAYS = int(os.getenv("SESSION_DAYS", "7"))
