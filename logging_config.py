import logging
import os
from logging.handlers import RotatingFileHandler

import config_paths


def setup_logging(cfg):
    """Route logging to a rotating file in the config dir.

    The terminal belongs to curses while the dashboard runs, so nothing is
    logged to stderr. Returns the log file path, or None when the directory
    cannot be created (logging is then discarded).
    """
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    level = getattr(logging, cfg.get("LOG_LEVEL", "INFO"), logging.INFO)
    root.setLevel(level)

    log_path = cfg.get("LOG_PATH") or config_paths.LOG_PATH
    try:
        os.makedirs(os.path.dirname(log_path) or ".", exist_ok=True)
        handler = RotatingFileHandler(
            log_path, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
        )
    except OSError:
        root.addHandler(logging.NullHandler())
        return None

    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    root.addHandler(handler)

    log = logging.getLogger(__name__)
    for warning in cfg.get("WARNINGS", []):
        log.warning("config: %s", warning)
    return log_path
