# passcraft/config.py
"""
Saved generator settings for passcraft.
Settings saved as JSON in %APPDATA%/Passcraft/config.json (Windows) or ~/.passcraft/config.json (fallback)
"""

import os
import json
from typing import Dict, Any

from loguru import logger

from .options import (
    DEFAULT_DELIMITER,
    DEFAULT_PASSWORD_LENGTH,
    DEFAULT_WORD_COUNT,
    PassphraseOptions,
    PasswordOptions,
)

DEFAULTS: Dict[str, Any] = {
    "passphrase_mode": False,
    # password
    "length": DEFAULT_PASSWORD_LENGTH,
    "lower": True,
    "upper": True,
    "digits": True,
    "symbols": False,
    "no_repeat": False,
    # passphrase
    "word_count": DEFAULT_WORD_COUNT,
    "delimiter": DEFAULT_DELIMITER,
    "capitalize_words": False,
    "include_number_word": False,
    "include_symbol_word": False,
    # shared
    "exclude_similar": False,
    "no_ambiguous": False,
}

def _appdata_dir() -> str:
    appdata = os.getenv("APPDATA")
    if appdata:
        d = os.path.join(appdata, "Passcraft")
    else:
        d = os.path.join(os.path.expanduser("~"), ".passcraft")
    os.makedirs(d, exist_ok=True)
    return d

def config_path() -> str:
    return os.path.join(_appdata_dir(), "config.json")

def load_config() -> Dict[str, Any]:
    p = config_path()
    if not os.path.exists(p):
        return DEFAULTS.copy()
    try:
        with open(p, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("ignoring unreadable settings file {}: {}", p, e)
        return DEFAULTS.copy()
    if not isinstance(data, dict):
        logger.warning("ignoring settings file {}: expected an object", p)
        return DEFAULTS.copy()
    # merge defaults
    out = DEFAULTS.copy()
    out.update(data)
    return out

def save_config(cfg: Dict[str, Any]) -> None:
    p = config_path()
    with open(p, "w", encoding="utf-8") as f:
        json.dump(cfg, f, ensure_ascii=False, indent=2)

def reset_config() -> Dict[str, Any]:
    cfg = DEFAULTS.copy()
    save_config(cfg)
    return cfg

def password_options(cfg: Dict[str, Any]) -> PasswordOptions:
    return PasswordOptions.from_dict(cfg)

def passphrase_options(cfg: Dict[str, Any]) -> PassphraseOptions:
    return PassphraseOptions.from_dict(cfg)
