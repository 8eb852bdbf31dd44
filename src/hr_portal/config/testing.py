import os

SECRET_KEY = "test-secret"

# In memory unless a test points it at a file
DATA_FILE = os.getenv("DATA_FILE") or None

DEBUG = False
TESTING = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
