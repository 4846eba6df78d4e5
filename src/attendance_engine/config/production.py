import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

HONOR_CONFIGURED_WEIGHTS = bool(int(os.getenv("HONOR_CONFIGURED_WEIGHTS", "0")))

DEFAULT_BRANCH = os.getenv("DEFAULT_BRANCH", "office")
