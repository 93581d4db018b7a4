# Opening window bounds (plies)
OPENING_WINDOW_PLIES = 20
MIN_CLASSIFIABLE_PLIES = 2

# Player color constants
COLOR_WHITE = "white"
COLOR_BLACK = "black"

# SAN suffixes that mark a check or a mate
SAN_ANNOTATION_SUFFIXES = ("+", "#")

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

USERNAME_ENV_VAR = "CHESS_USERNAME"
LOG_LEVEL_ENV_VAR = "REPERTOIRE_LOG_LEVEL"
