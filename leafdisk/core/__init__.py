"""
Leaf angle sampling engine.

Includes:
- Direction primitives (hemisphere, sphere, disk, tangent frames)
- Zenith-angle CDFs (trigonometric family, Verhoef bimodal)
- Tabulated CDF inversion
- Leaf angle distributions and the textual factory
- Leaf disk placement
"""

# ============================================================================
# Direction Primitives
# ============================================================================
from .direction import (
    uniform_hemisphere_sample,
    uniform_sphere_sample,
    uniform_disk_sample,
    build_tangent_frame,
    build_onb,
)

# ============================================================================
# Zenith CDFs
# ============================================================================
from .lidf import (
    planophile_lidf,
    erectophile_lidf,
    plagiophile_lidf,
    extremophile_lidf,
    spherical_lidf,
    verhoef_bimodal_lidf,
    make_verhoef_lidf,
    check_verhoef_params,
    TRIGONOMETRIC_LIDFS,
)

from .tabulated import (
    TabulatedCDF,
    build_cdf_table,
)

# ============================================================================
# Distributions
# ============================================================================
from .distributions import (
    LeafAngleDistribution,
    UniformLeafAngleDistribution,
    IsotropicLeafAngleDistribution,
    MicrofacetLeafAngleDistribution,
    TrowbridgeReitzLeafAngleDistribution,
    BeckmannLeafAngleDistribution,
    trigonometric_distribution,
    verhoef_bimodal_distribution,
    trowbridge_reitz_slope,
)

from .factory import (
    parse_distribution,
    DISTRIBUTION_NAMES,
)

# ============================================================================
# Placement
# ============================================================================
from .placement import (
    count_leaves,
    generate_leaf_disks,
)


__all__ = [
    # Direction primitives
    "uniform_hemisphere_sample",
    "uniform_sphere_sample",
    "uniform_disk_sample",
    "build_tangent_frame",
    "build_onb",

    # Zenith CDFs
    "planophile_lidf",
    "erectophile_lidf",
    "plagiophile_lidf",
    "extremophile_lidf",
    "spherical_lidf",
    "verhoef_bimodal_lidf",
    "make_verhoef_lidf",
    "check_verhoef_params",
    "TRIGONOMETRIC_LIDFS",
    "TabulatedCDF",
    "build_cdf_table",

    # Distributions
    "LeafAngleDistribution",
    "UniformLeafAngleDistribution",
    "IsotropicLeafAngleDistribution",
    "MicrofacetLeafAngleDistribution",
    "TrowbridgeReitzLeafAngleDistribution",
    "BeckmannLeafAngleDistribution",
    "trigonometric_distribution",
    "verhoef_bimodal_distribution",
    "trowbridge_reitz_slope",
    "parse_distribution",
    "DISTRIBUTION_NAMES",

    # Placement
    "count_leaves",
    "generate_leaf_disks",
]
