import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", "data/db.json")

DEBUG = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
