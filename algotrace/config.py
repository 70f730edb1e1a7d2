import logging
import os

# Defaults can be overridden from the environment, same knobs as the
# renderer's SVL_* variables: unparsable values fall back silently.
DEFAULT_ARRAY = [64, 34, 25, 12, 22, 11, 90]

try:
    DEFAULT_SPEED = int(os.environ.get("ALGOTRACE_DEFAULT_SPEED", "3"))
except ValueError:
    DEFAULT_SPEED = 3

try:
    MAX_ARRAY_LENGTH = int(os.environ.get("ALGOTRACE_MAX_ARRAY_LENGTH", "50"))
except ValueError:
    MAX_ARRAY_LENGTH = 50

try:
    MAX_RECURSION_DEPTH = int(os.environ.get("ALGOTRACE_MAX_RECURSION_DEPTH", "20"))
except ValueError:
    MAX_RECURSION_DEPTH = 20

MIN_SPEED = 1
MAX_SPEED = 10


def log_level() -> int:
    name = os.environ.get("ALGOTRACE_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def clamp_speed(speed) -> int:
    try:
        value = int(speed)
    except (TypeError, ValueError):
        return DEFAULT_SPEED if MIN_SPEED <= DEFAULT_SPEED <= MAX_SPEED else 3
    return max(MIN_SPEED, min(MAX_SPEED, value))
