"""
Diagnostics for sampled leaf normals.
"""

from .lidf_stats import (
    zenith_angles,
    empirical_cdf,
    ks_distance,
    lidf_density,
)

__all__ = [
    "zenith_angles",
    "empirical_cdf",
    "ks_distance",
    "lidf_density",
]
