"""
Configuration for the splitpad editor.

Settings live in ~/splitpad/config/splitpad.conf as plain `key=value` lines:

    theme=charm
    log_file=/tmp/splitpad.log

Unknown keys and malformed lines are ignored; a missing file means defaults.
"""
import os
from dataclasses import dataclass, fields

from splitpad import logger

CONFIG_DIR  = os.path.expanduser("~/splitpad/config")
CONFIG_PATH = os.path.join(CONFIG_DIR, "splitpad.conf")
THEMES_DIR  = os.path.join(CONFIG_DIR, "themes")

@dataclass
class Config:
    theme   : str = "charm"
    log_file: str = logger.LOG_FILE_PATH

def parse_config(text: str) -> Config:
    """Build a Config from the contents of a config file."""
    config = Config()
    known = {f.name for f in fields(Config)}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip()
        if key in known and value:
            setattr(config, key, value)
    return config

def load_config(path: str = None) -> Config:
    """
    Load settings from `path` (default CONFIG_PATH).
    Returns defaults if the file does not exist or cannot be read.
    """
    path = path or CONFIG_PATH
    if not os.path.isfile(path):
        return Config()
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return parse_config(f.read())
    except OSError as e:
        logger.log(f"could not read config {path}: {e}")
        return Config()
