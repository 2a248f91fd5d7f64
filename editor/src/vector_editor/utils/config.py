"""Configuration management for the editor core.

Settings live in a JSON file (~/.vector_editor/config.json by default).
Missing files and missing keys fall back to DEFAULT_CONFIG.
"""

import os
import json
import copy
import logging

from vector_editor.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME, DEFAULT_CONFIG
from vector_editor.utils.logger import loggerRaise

_logger = logging.getLogger('config')


def get_config_path():
    """Default config file path in the user's home directory"""
    return os.path.join(os.path.expanduser('~'), CONFIG_DIR_NAME, CONFIG_FILE_NAME)


def load_config(path=None):
    """Load settings merged over the defaults

    Args:
        path: Config file path (defaults to get_config_path())

    Returns:
        dict with every DEFAULT_CONFIG key present
    """
    path = path or get_config_path()
    config = copy.deepcopy(DEFAULT_CONFIG)
    try:
        if os.path.exists(path):
            with open(path, 'r', encoding='utf-8') as f:
                stored = json.load(f)
            unknown = set(stored) - set(DEFAULT_CONFIG)
            if unknown:
                _logger.warning(f"Ignoring unknown config keys: {sorted(unknown)}")
            for key in DEFAULT_CONFIG:
                if key in stored:
                    config[key] = stored[key]
            _logger.debug(f"Loaded config from {path}")
    except Exception as e:
        loggerRaise(e, "Error loading config")
    return config


def save_config(config, path=None):
    """Save settings to the config file

    Args:
        config: Settings dict (only DEFAULT_CONFIG keys are written)
        path: Config file path (defaults to get_config_path())
    """
    path = path or get_config_path()
    try:
        # Create config directory if it doesn't exist
        config_dir = os.path.dirname(path)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)

        data = {key: config[key] for key in DEFAULT_CONFIG if key in config}
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        _logger.debug(f"Saved config to {path}")
    except Exception as e:
        loggerRaise(e, "Error saving config")


def style_options(config):
    """Element factory style options taken from a config dict"""
    return {
        'fill': config.get('fill'),
        'stroke': config.get('stroke'),
        'stroke_width': config.get('stroke_width'),
        'font_size': config.get('font_size'),
        'font_family': config.get('font_family'),
    }
