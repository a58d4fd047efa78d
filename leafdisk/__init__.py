"""
leafdisk - Synthetic Leaf Disk Canopies

Scatters flat circular leaf disks inside a canopy volume, with normals drawn
from a leaf angle distribution, and writes them out for external renderers.

Components:
    - Core: Leaf angle distributions, tabulated CDFs, placement
    - Geometry: Box / sphere / cylinder volumes, leaf disks
    - Analysis: Zenith statistics of sampled normals
    - IO: GList, OBJ and PNG export
    - Utils: Configuration, random source and helper functions

Example:
    >>> from leafdisk import RandomSource, BoxVolume, parse_distribution
    >>> from leafdisk import generate_leaf_disks, save_leaf_disks
    >>>
    >>> rng = RandomSource(seed=0)
    >>> lad = parse_distribution("VerhoefBimodal 0.3 -0.2")
    >>> disks = generate_leaf_disks(BoxVolume([0, 0, 0], [1, 1, 1]), lad, 2.0, 0.05, rng)
    >>> save_leaf_disks("canopy.obj", disks)
"""

__version__ = "1.0.0"

# ============================================================================
# Core
# ============================================================================
from .core import (
    # Distributions
    LeafAngleDistribution,
    UniformLeafAngleDistribution,
    IsotropicLeafAngleDistribution,
    TrowbridgeReitzLeafAngleDistribution,
    BeckmannLeafAngleDistribution,
    trigonometric_distribution,
    verhoef_bimodal_distribution,
    parse_distribution,

    # Tabulated CDF
    TabulatedCDF,

    # Placement
    count_leaves,
    generate_leaf_disks,
)

# ============================================================================
# Geometry
# ============================================================================
from .geometry import (
    BoxVolume,
    SphereVolume,
    CylinderVolume,
    volume_from_cfg,
    LeafDisk,
)

# ============================================================================
# Analysis
# ============================================================================
from .analysis import (
    zenith_angles,
    empirical_cdf,
    ks_distance,
)

# ============================================================================
# IO
# ============================================================================
from .io import (
    save_leaf_disks,
    save_zenith_hist_png,
)

# ============================================================================
# Utils
# ============================================================================
from .utils import (
    RandomSource,
    default_cfg,
    merge_cfg,
    load_config,
    DEFAULT_TABLE_SIZE,
)


__all__ = [
    "__version__",

    # Core - Distributions
    "LeafAngleDistribution",
    "UniformLeafAngleDistribution",
    "IsotropicLeafAngleDistribution",
    "TrowbridgeReitzLeafAngleDistribution",
    "BeckmannLeafAngleDistribution",
    "trigonometric_distribution",
    "verhoef_bimodal_distribution",
    "parse_distribution",
    "TabulatedCDF",

    # Core - Placement
    "count_leaves",
    "generate_leaf_disks",

    # Geometry
    "BoxVolume",
    "SphereVolume",
    "CylinderVolume",
    "volume_from_cfg",
    "LeafDisk",

    # Analysis
    "zenith_angles",
    "empirical_cdf",
    "ks_distance",

    # IO
    "save_leaf_disks",
    "save_zenith_hist_png",

    # Utils
    "RandomSource",
    "default_cfg",
    "merge_cfg",
    "load_config",
    "DEFAULT_TABLE_SIZE",
]
