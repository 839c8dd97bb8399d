import copy
import json
import logging
import os

from text_compare.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "text_compare.json"

# -------------------- defaults --------------------

DEFAULT_CONFIG = {
    "src_dir": None,
    "dest_dir": None,
    "report_file": "diff.txt",
    "encoding": "utf-8",
    "report_unmatched": False,    # list files found on one side only
    "continue_on_error": False,   # keep going after an unreadable pair
    "summary_file": None,         # .xlsx or .csv mismatch summary
    "html_dir": None,             # side-by-side html per pair
    "log_file": "logs/text_compare.log",
    "log_level": "INFO",
    "http": {
        "base_url": None,
        "cert_file": None,
        "key_file": None,
        "verify": True,
        "timeout": 30,
    },
}


def _merge(base, override, prefix=""):
    for key, value in override.items():
        if key not in base:
            raise ConfigError(f"Unknown config key: {prefix}{key}")
        if isinstance(base[key], dict):
            if not isinstance(value, dict):
                raise ConfigError(f"Config key {prefix}{key} must be an object")
            _merge(base[key], value, prefix=f"{prefix}{key}.")
        else:
            base[key] = value
    return base


def load_config(path=CONFIG_FILE):
    """Defaults overlaid with the JSON file at path. A missing file means defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if not path or not os.path.exists(path):
        logger.debug(f"No config file at {path}, using defaults")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Malformed config file {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must hold a JSON object")

    logger.debug(f"Loaded config from {path}")
    return _merge(config, data)


def save_config(config, path=CONFIG_FILE):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)
