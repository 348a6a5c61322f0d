"""
Configuration management for consensus
"""

import copy
import yaml
from typing import Any, Dict

DEFAULT_CONFIG = {
    "ransac": {
        "ntrials": 1000,
        "max_error": 1.0,
        "min_inliers": 0,
        "max_attempts": 10,
        "seed": None
    },
    "logging": {
        "level": "INFO",
        "log_file": None
    },
    "output": {
        "precision": 6
    }
}


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of ``base`` with ``overrides`` merged in, section by section."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_config(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path: str = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file over the defaults.
    
    Args:
        path: Path to a YAML file (optional)
        
    Returns:
        Complete configuration dictionary
    """
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)
    
    with open(path, 'r') as f:
        overrides = yaml.safe_load(f) or {}
    
    if not isinstance(overrides, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    unknown = set(overrides) - set(DEFAULT_CONFIG)
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")
    
    return merge_config(DEFAULT_CONFIG, overrides)
