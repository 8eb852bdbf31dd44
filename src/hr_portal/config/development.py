import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON document holding every collection
DATA_FILE = os.getenv("DATA_FILE", "data/db.json")

DEBUG = True

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
