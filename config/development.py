import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Load demo clients, team members and users into memory on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# Trailing window (calendar months) for Bradford Factor scoring
BRADFORD_ROLLING_MONTHS = int(os.getenv("BRADFORD_ROLLING_MONTHS", "12"))
