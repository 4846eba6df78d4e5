import os

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Score with the weights stored in the configuration instead of the fixed 80/10/10 split
HONOR_CONFIGURED_WEIGHTS = bool(int(os.getenv("HONOR_CONFIGURED_WEIGHTS", "0")))

# Branch whose schedule applies when a worker's branch has none
DEFAULT_BRANCH = os.getenv("DEFAULT_BRANCH", "office")
