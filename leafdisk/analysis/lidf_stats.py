"""Empirical zenith statistics of sampled leaf normals."""

import numpy as np
from typing import Callable
from ..utils.utils import as_numpy


def zenith_angles(normals) -> np.ndarray:
    """Zenith angle of each normal with respect to +Z, in radians."""
    N = np.atleast_2d(as_numpy(normals))
    cos_theta = N[:, 2] / np.linalg.norm(N, axis=1)
    return np.arccos(np.clip(cos_theta, -1.0, 1.0))


def empirical_cdf(samples, grid) -> np.ndarray:
    """Fraction of samples <= each grid value."""
    s = np.sort(np.asarray(samples, dtype=np.float64))
    return np.searchsorted(s, np.asarray(grid, dtype=np.float64), side="right") / max(len(s), 1)


def ks_distance(thetas, cdf: Callable[[float], float]) -> float:
    """Kolmogorov-Smirnov statistic between samples and a continuous CDF."""
    s = np.sort(np.asarray(thetas, dtype=np.float64))
    n = len(s)
    if n == 0:
        raise ValueError("ks_distance needs at least one sample")
    F = np.array([cdf(t) for t in s])
    upper = np.arange(1, n + 1) / n - F
    lower = F - np.arange(0, n) / n
    return float(max(upper.max(), lower.max()))


def lidf_density(cdf: Callable[[float], float], thetas, h: float = 1e-5) -> np.ndarray:
    """Zenith density dF/dtheta by central differences."""
    t = np.asarray(thetas, dtype=np.float64)
    lo = np.clip(t - h, 0.0, 0.5 * np.pi)
    hi = np.clip(t + h, 0.0, 0.5 * np.pi)
    return np.array([(cdf(b) - cdf(a)) / (b - a) for a, b in zip(lo, hi)])
