"""
Configuration for the batch driver.

Configs are YAML files under config/. Keys not present in the file fall
back to DEFAULT_CONFIG.
"""

from pathlib import Path
from typing import Any, Dict, Union

import yaml

DEFAULT_CONFIG_PATH = Path('config/default.yaml')

DEFAULT_CONFIG = {
    'limit': 1000,
    'candidates': [],
    'verbose': False,
}


def _is_int(value) -> bool:
    # bool is an int subclass; reject it for numeric keys
    return isinstance(value, int) and not isinstance(value, bool)


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check types and ranges of a merged config. Returns it unchanged."""
    unknown = set(config) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    limit = config['limit']
    if not _is_int(limit) or limit < 0:
        raise ValueError(f"'limit' must be a non-negative integer, got {limit!r}")

    candidates = config['candidates']
    if not isinstance(candidates, list) or not all(_is_int(c) for c in candidates):
        raise ValueError(f"'candidates' must be a list of integers, got {candidates!r}")

    if not isinstance(config['verbose'], bool):
        raise ValueError(f"'verbose' must be true or false, got {config['verbose']!r}")

    return config


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    """
    Load a YAML config and merge it over the defaults.

    Parameters
    ----------
    path : str or Path
        Config file location.

    Returns
    -------
    dict
        Config with keys 'limit', 'candidates', 'verbose'.
    """
    with open(path) as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ValueError(f"Config {path} must be a mapping, got {type(loaded).__name__}")

    config = dict(DEFAULT_CONFIG)
    config['candidates'] = list(DEFAULT_CONFIG['candidates'])
    config.update(loaded)
    return validate_config(config)
