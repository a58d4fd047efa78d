"""Configuration and numerical constants for canopy generation."""

import copy
from pathlib import Path
from typing import Dict, Tuple

# Numerical constants
EPS_NORMALIZE = 1e-12
EPS_UNIT = 1e-12
DEFAULT_TABLE_SIZE = 256
VERHOEF_TOL = 1e-6
VERHOEF_MAX_ITER = 10000
MIN_OBJ_RESOLUTION = 3

DEFAULT_CONFIG = {
    "seed": 0,
    "lai": 1.0,
    "radius": 0.1,
    "output": "leaf.glist",
    "distribution": "Uniform",
    "table_size": DEFAULT_TABLE_SIZE,
    "obj_resolution": 10,
}

VOLUME_CONFIG = {
    "type": "box",
    "from": [0.0, 0.0, 0.0],
    "to": [1.0, 1.0, 1.0],
    "center": [0.0, 0.0, 0.0],
    "radius": 1.0,
    "height": 1.0,
}

PNG_CONFIG = {
    "enabled": False,
    "path": None,
    "dpi": 160,
    "bins": 45,
}


def default_cfg() -> Dict:
    """Default generator configuration (box volume, uniform leaves)."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    config["volume"] = copy.deepcopy(VOLUME_CONFIG)
    config["png"] = copy.deepcopy(PNG_CONFIG)
    return config


def merge_cfg(base: Dict, user: Dict) -> Dict:
    """Recursively merge ``user`` over ``base`` without mutating either.

    A section that is a mapping in ``base`` keeps its defaults when ``user``
    gives None for it, and any other non-mapping value raises ValueError.
    """
    merged = copy.deepcopy(base)
    for key, val in (user or {}).items():
        if isinstance(merged.get(key), dict):
            if val is None:
                continue
            if not isinstance(val, dict):
                raise ValueError(f"Config section '{key}' must be a mapping (got {val!r})")
            merged[key] = merge_cfg(merged[key], val)
        else:
            merged[key] = copy.deepcopy(val)
    return merged


def load_config(config_path: str) -> Tuple[Dict, Path]:
    """Load configuration from YAML file."""
    import yaml

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}

    if not isinstance(cfg, dict):
        raise ValueError(f"Config file must hold a mapping: {config_path}")

    return cfg, config_path.parent
