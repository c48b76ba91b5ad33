"""Configuration loader and validator for lconvert.

Provides ``load_config(path)`` which reads a JSON config (with comment and
trailing-comma tolerant sanitizer) and merges it over ``DEFAULT_CONFIG``.
Without an explicit path, ``~/.config/lconvert/config.json`` is used when it
exists.

``validate_config(conf)`` normalizes and validates config keys, raising
``ValueError`` on invalid values.
"""

from __future__ import annotations

import json
import logging
import os
import re

logger = logging.getLogger(__name__)

USER_CONFIG_PATH = '~/.config/lconvert/config.json'

DEFAULT_CONFIG: dict = {
    'chunk_threshold': 1000,
    'max_workers': 4,
    'strict': False,
    'debug': False,
    'host': '127.0.0.1',
    'port': 8000,
}


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _sanitize_json_text(s: str) -> str:
    """Remove ``#``/``//`` comments and trailing commas from JSON-like text."""
    # Hash-style line comments
    s = re.sub(r"^[ \t]*#.*$", "", s, flags=re.MULTILINE)
    # C++-style line comments (only when not inside a URL-like "://")
    s = re.sub(r"(?<!:)//.*$", "", s, flags=re.MULTILINE)
    # Trailing commas before } or ]
    s = re.sub(r",[ \t\r\n]*(\}|\])", r"\1", s)
    return s


def _int_in_range(conf: dict, key: str, low: int, high: int | None = None) -> int:
    raw = conf.get(key, DEFAULT_CONFIG[key])
    if isinstance(raw, bool):
        raise ValueError(f"Invalid '{key}': {raw!r}")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid '{key}': {raw!r}")
    if value < low or (high is not None and value > high):
        bound = f"between {low} and {high}" if high is not None else f">= {low}"
        raise ValueError(f"Invalid '{key}': {raw!r} (must be {bound})")
    return value


def _bool(conf: dict, key: str) -> bool:
    value = conf.get(key, DEFAULT_CONFIG[key])
    if not isinstance(value, bool):
        raise ValueError(f"Invalid '{key}': must be boolean")
    return value


# ------------------------------------------------------------------
# Validation
# ------------------------------------------------------------------

def validate_config(conf: dict | None) -> dict:
    """Validate and normalize configuration dictionary.

    Returns a normalized dict with all expected keys.
    Raises ``ValueError`` on invalid values.
    """
    if conf is None:
        conf = {}
    if not isinstance(conf, dict):
        raise ValueError("Config must be a JSON object")

    out = dict(DEFAULT_CONFIG)
    out['chunk_threshold'] = _int_in_range(conf, 'chunk_threshold', 0)
    out['max_workers'] = _int_in_range(conf, 'max_workers', 1, 64)
    out['strict'] = _bool(conf, 'strict')
    out['debug'] = _bool(conf, 'debug')

    host = conf.get('host', DEFAULT_CONFIG['host'])
    if not isinstance(host, str) or not host.strip():
        raise ValueError("Invalid 'host': must be a non-empty string")
    out['host'] = host.strip()

    out['port'] = _int_in_range(conf, 'port', 1, 65535)
    return out


def _read_and_merge(path: str, target_config: dict, debug: bool = False) -> bool:
    """Read a JSON file, validate, and merge into *target_config*.

    Only keys explicitly present in the file override. Returns True on
    success, False on any error (the target is left untouched).
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except OSError as exc:
        if debug:
            logger.warning("Cannot read config %s: %s", path, exc)
        return False

    try:
        cfg = json.loads(raw)
    except json.JSONDecodeError:
        try:
            cfg = json.loads(_sanitize_json_text(raw))
        except json.JSONDecodeError as exc:
            if debug:
                logger.warning("JSON parse error in %s: %s", path, exc)
            return False

    try:
        validated = validate_config(cfg)
    except ValueError as verr:
        if debug:
            logger.warning("Invalid config %s: %s", path, verr)
        return False

    for k in cfg:
        if k in validated:
            target_config[k] = validated[k]
    return True


# ------------------------------------------------------------------
# Top-level loader
# ------------------------------------------------------------------

def load_config(config_path: str | None = None, debug: bool = False) -> dict:
    """Load and merge configuration.

    If *config_path* is given, uses only that file (returns defaults if
    the file does not exist). Otherwise falls back to
    ``~/.config/lconvert/config.json``.

    Returns the effective configuration dict (always has all default keys).
    """
    config = dict(DEFAULT_CONFIG)

    if config_path is not None:
        if os.path.exists(config_path):
            _read_and_merge(config_path, config, debug=debug)
        elif debug:
            logger.warning("Config file %s not found, using defaults", config_path)
        return config

    user_cfg = os.path.expanduser(USER_CONFIG_PATH)
    if os.path.exists(user_cfg):
        _read_and_merge(user_cfg, config, debug=debug)

    return config
