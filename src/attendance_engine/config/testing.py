LOG_LEVEL = "DEBUG"

HONOR_CONFIGURED_WEIGHTS = False

DEFAULT_BRANCH = "office"

TESTING = True
