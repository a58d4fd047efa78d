"""Inverse-CDF direction primitives over a 2D uniform sample."""

import math
import numpy as np
from typing import Sequence, Tuple


def uniform_hemisphere_sample(u: Sequence[float]) -> np.ndarray:
    """Uniform direction on the upper (+Z) hemisphere.

    The zenith density is proportional to sin(theta), so cos(theta) is
    uniform on [0, 1).
    """
    cos_theta = float(u[0])
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    phi = 2.0 * math.pi * float(u[1])
    return np.array([sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta])


def uniform_sphere_sample(u: Sequence[float]) -> np.ndarray:
    """Uniform direction on the unit sphere."""
    cos_theta = 1.0 - 2.0 * float(u[0])
    sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
    phi = 2.0 * math.pi * float(u[1])
    return np.array([sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta])


def uniform_disk_sample(u: Sequence[float]) -> np.ndarray:
    """Uniform point on the unit disk (polar mapping)."""
    r = math.sqrt(float(u[0]))
    phi = 2.0 * math.pi * float(u[1])
    return np.array([r * math.cos(phi), r * math.sin(phi)])


def build_tangent_frame(normal) -> Tuple[np.ndarray, np.ndarray]:
    """Build orthonormal tangent frame [t1, t2] perpendicular to normal."""
    n = np.asarray(normal, dtype=np.float64)
    a = np.array([1.0, 0.0, 0.0])
    if abs(float(np.dot(n, a))) > 0.9:
        a = np.array([0.0, 1.0, 0.0])

    t1 = a - np.dot(a, n) * n
    t1 = t1 / np.linalg.norm(t1)
    t2 = np.cross(n, t1)
    t2 = t2 / np.linalg.norm(t2)

    return t1, t2


def build_onb(normal) -> np.ndarray:
    """3x3 basis whose columns are (tangent, bitangent, normal)."""
    n = np.asarray(normal, dtype=np.float64)
    t1, t2 = build_tangent_frame(n)
    return np.stack([t1, t2, n], axis=1)
