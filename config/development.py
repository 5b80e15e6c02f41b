import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# The dashboard used to fake a half-second API round trip; opt in with this
STORE_LATENCY_SECONDS = float(os.getenv("STORE_LATENCY_SECONDS", "0"))

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Seed the in-memory store with random demo data on startup
AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "1")))
SEED_EMPLOYEES = int(os.getenv("SEED_EMPLOYEES", "30"))
SEED_DAYS = int(os.getenv("SEED_DAYS", "30"))
SEED_RANDOM = os.getenv("SEED_RANDOM") or None
