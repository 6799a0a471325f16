SECRET_KEY = "test-secret"

API_BASE_URL = "http://ems-api.test"
API_TIMEOUT = None

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SESSION_DAYS = 1
