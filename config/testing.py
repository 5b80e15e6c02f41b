import os

SECRET_KEY = "test-secret"

STORE_LATENCY_SECONDS = 0.0

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports-test")

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_SEED = False
SEED_EMPLOYEES = 5
SEED_DAYS = 7
SEED_RANDOM = "42"
