import json
import logging
import os

logger = logging.getLogger(__name__)

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tabpeek")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "tabpeek.log")

# default settings
IGNORE_CASE_DEFAULT = False
COLUMN_PADDING_DEFAULT = 2
MAX_COLUMN_WIDTH_DEFAULT = None
ROW_NUMBERS_DEFAULT = True
STATUS_SECONDS_DEFAULT = 3
LOG_LEVEL_DEFAULT = "WARNING"

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def load_config():
    cfg = {
        "IGNORE_CASE": IGNORE_CASE_DEFAULT,
        "COLUMN_PADDING": COLUMN_PADDING_DEFAULT,
        "MAX_COLUMN_WIDTH": MAX_COLUMN_WIDTH_DEFAULT,
        "ROW_NUMBERS": ROW_NUMBERS_DEFAULT,
        "STATUS_SECONDS": STATUS_SECONDS_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        logger.warning("ignoring config %s: %s", CONFIG_JSON, exc)
        return cfg

    if not isinstance(data, dict):
        logger.warning("ignoring config %s: top level is not an object", CONFIG_JSON)
        return cfg

    def take(key, valid):
        if key not in data:
            return
        value = data[key]
        if valid(value):
            cfg[key.upper()] = value
        else:
            logger.warning("ignoring config value %s=%r", key, value)

    take("ignore_case", lambda v: isinstance(v, bool))
    take("row_numbers", lambda v: isinstance(v, bool))
    take("column_padding", lambda v: _is_int(v) and v >= 0)
    take("max_column_width", lambda v: v is None or (_is_int(v) and v > 0))
    take("status_seconds", lambda v: isinstance(v, (int, float)) and not isinstance(v, bool) and v > 0)
    take("log_level", lambda v: isinstance(v, str) and v.upper() in LOG_LEVELS)
    cfg["LOG_LEVEL"] = cfg["LOG_LEVEL"].upper()

    return cfg
