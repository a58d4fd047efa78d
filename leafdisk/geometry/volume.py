"""Canopy volumes: bounds for leaf position sampling."""

import math
import numpy as np
from typing import Dict
from ..utils.utils import parse_vec3
from ..core.direction import uniform_sphere_sample, uniform_disk_sample


class BoxVolume:
    """Axis-aligned box; corners are normalized to (min, max)."""

    kind = "box"

    def __init__(self, corner_from=(0.0, 0.0, 0.0), corner_to=(1.0, 1.0, 1.0)):
        a = np.asarray(corner_from, dtype=np.float64)
        b = np.asarray(corner_to, dtype=np.float64)
        self.lower = np.minimum(a, b)
        self.upper = np.maximum(a, b)

    def footprint_area(self) -> float:
        extent = self.upper - self.lower
        return float(extent[0] * extent[1])

    def sample_position(self, rng) -> np.ndarray:
        u = np.asarray(rng.next_tuple(3))
        return self.lower + u * (self.upper - self.lower)

    def contains(self, p, tol: float = 1e-12) -> bool:
        p = np.asarray(p, dtype=np.float64)
        return bool(np.all(p >= self.lower - tol) and np.all(p <= self.upper + tol))

    def __repr__(self):
        return f"BoxVolume(lower={self.lower.tolist()}, upper={self.upper.tolist()})"


class SphereVolume:
    """Solid sphere."""

    kind = "sphere"

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0):
        radius = float(radius)
        if not radius > 0:
            raise ValueError(f"sphere radius must be positive (got {radius})")
        self.center = np.asarray(center, dtype=np.float64)
        self.radius = radius

    def footprint_area(self) -> float:
        return math.pi * self.radius * self.radius

    def sample_position(self, rng) -> np.ndarray:
        u = rng.next_tuple(3)
        direction = uniform_sphere_sample(u[:2])
        r = self.radius * u[2] ** (1.0 / 3.0)
        return self.center + r * direction

    def contains(self, p, tol: float = 1e-12) -> bool:
        return bool(np.linalg.norm(np.asarray(p) - self.center) <= self.radius + tol)

    def __repr__(self):
        return f"SphereVolume(center={self.center.tolist()}, radius={self.radius})"


class CylinderVolume:
    """Vertical cylinder; ``center`` is the centre of its base."""

    kind = "cylinder"

    def __init__(self, center=(0.0, 0.0, 0.0), radius: float = 1.0, height: float = 1.0):
        radius = float(radius)
        height = float(height)
        if not (radius > 0 and height > 0):
            raise ValueError(
                f"cylinder radius and height must be positive (got {radius}, {height})")
        self.center = np.asarray(center, dtype=np.float64)
        self.radius = radius
        self.height = height

    def footprint_area(self) -> float:
        return math.pi * self.radius * self.radius

    def sample_position(self, rng) -> np.ndarray:
        u = rng.next_tuple(3)
        xy = self.radius * uniform_disk_sample(u[:2])
        return self.center + np.array([xy[0], xy[1], u[2] * self.height])

    def contains(self, p, tol: float = 1e-12) -> bool:
        d = np.asarray(p, dtype=np.float64) - self.center
        return bool(math.hypot(d[0], d[1]) <= self.radius + tol and -tol <= d[2] <= self.height + tol)

    def __repr__(self):
        return (f"CylinderVolume(center={self.center.tolist()}, "
                f"radius={self.radius}, height={self.height})")


def volume_from_cfg(cfg: Dict):
    """Build a volume from a ``volume`` config section."""
    kind = str(cfg.get("type", "box")).lower()
    if kind == "box":
        return BoxVolume(parse_vec3(cfg.get("from", [0, 0, 0])),
                         parse_vec3(cfg.get("to", [1, 1, 1])))
    if kind == "sphere":
        return SphereVolume(parse_vec3(cfg.get("center", [0, 0, 0])),
                            float(cfg.get("radius", 1.0)))
    if kind == "cylinder":
        return CylinderVolume(parse_vec3(cfg.get("center", [0, 0, 0])),
                              float(cfg.get("radius", 1.0)),
                              float(cfg.get("height", 1.0)))
    raise ValueError(f"unknown volume type \"{kind}\" (expected box, sphere or cylinder)")
