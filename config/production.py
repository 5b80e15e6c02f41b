import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

STORE_LATENCY_SECONDS = float(os.getenv("STORE_LATENCY_SECONDS", "0"))

EXPORT_DIR = os.getenv("EXPORT_DIR", "/var/lib/hr-dashboard/exports")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_SEED = bool(int(os.getenv("AUTO_SEED", "0")))
SEED_EMPLOYEES = int(os.getenv("SEED_EMPLOYEES", "30"))
SEED_DAYS = int(os.getenv("SEED_DAYS", "30"))
SEED_RANDOM = os.getenv("SEED_RANDOM") or None
