"""
Common utilities, configuration and the random source.
"""

# ============================================================================
# Configuration
# ============================================================================
from .config import (
    # Config functions
    default_cfg,
    merge_cfg,
    load_config,

    # Numerical constants
    EPS_NORMALIZE,
    EPS_UNIT,
    DEFAULT_TABLE_SIZE,
    VERHOEF_TOL,
    VERHOEF_MAX_ITER,
    MIN_OBJ_RESOLUTION,

    # Config dictionaries
    DEFAULT_CONFIG,
    VOLUME_CONFIG,
    PNG_CONFIG,
)

# ============================================================================
# Utilities
# ============================================================================
from .utils import (
    normalize,
    as_numpy,
    parse_vec3,
)

from .rng import RandomSource


__all__ = [
    # Configuration
    "default_cfg",
    "merge_cfg",
    "load_config",

    # Constants
    "EPS_NORMALIZE",
    "EPS_UNIT",
    "DEFAULT_TABLE_SIZE",
    "VERHOEF_TOL",
    "VERHOEF_MAX_ITER",
    "MIN_OBJ_RESOLUTION",

    # Config dictionaries
    "DEFAULT_CONFIG",
    "VOLUME_CONFIG",
    "PNG_CONFIG",

    # Utilities
    "normalize",
    "as_numpy",
    "parse_vec3",

    # Random source
    "RandomSource",
]
