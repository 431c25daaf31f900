import json
import os

from default_sections import DEFAULT_SECTIONS, PLACEHOLDER_ROWS

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "navipod")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "navipod.log")

# default settings
LOG_LEVEL_DEFAULT = "INFO"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _parse_section(spec):
    if not isinstance(spec, dict):
        return None
    title = spec.get("title")
    if not isinstance(title, str) or not title.strip():
        return None
    height = spec.get("display_height", 1)
    if not isinstance(height, int) or isinstance(height, bool) or height < 1:
        return None
    rows = spec.get("rows", PLACEHOLDER_ROWS)
    if not isinstance(rows, int) or isinstance(rows, bool) or rows < 0:
        rows = PLACEHOLDER_ROWS
    prefix = spec.get("name_prefix")
    if not isinstance(prefix, str) or not prefix:
        prefix = title.strip().lower().rstrip("s") + "name"
    return {
        "title": title.strip(),
        "display_height": height,
        "rows": rows,
        "name_prefix": prefix,
    }


def load_config():
    cfg = {
        "SECTIONS": [dict(s) for s in DEFAULT_SECTIONS],
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "LOG_PATH": LOG_PATH,
        "WARNINGS": [],
    }

    if os.path.exists(CONFIG_JSON):
        try:
            with open(CONFIG_JSON, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            cfg["WARNINGS"].append(f"ignoring {CONFIG_JSON}: {e}")
            data = None

        if data is not None and not isinstance(data, dict):
            cfg["WARNINGS"].append(f"ignoring {CONFIG_JSON}: top level must be an object")
        elif isinstance(data, dict):
            sections = data.get("sections")
            if isinstance(sections, list):
                parsed = []
                for idx, spec in enumerate(sections):
                    section = _parse_section(spec)
                    if section is None:
                        cfg["WARNINGS"].append(f"skipping invalid section #{idx}")
                        continue
                    parsed.append(section)
                if parsed:
                    cfg["SECTIONS"] = parsed
            elif sections is not None:
                cfg["WARNINGS"].append("'sections' must be a list")

            level = data.get("log_level")
            if isinstance(level, str) and level.upper() in LOG_LEVELS:
                cfg["LOG_LEVEL"] = level.upper()
            elif level is not None:
                cfg["WARNINGS"].append(f"unknown log_level {level!r}")

    env_level = os.environ.get("NAVIPOD_LOG_LEVEL")
    if env_level and env_level.upper() in LOG_LEVELS:
        cfg["LOG_LEVEL"] = env_level.upper()

    return cfg
