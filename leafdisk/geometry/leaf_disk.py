"""Leaf disk: flat, circular, oriented surface element."""

import math
import numpy as np
from dataclasses import dataclass, field

UNIT_NORMAL_TOL = 1e-6


@dataclass(frozen=True, eq=False)
class LeafDisk:
    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    normal: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, 1.0]))
    radius: float = 1.0

    def __post_init__(self):
        if not self.radius > 0:
            raise ValueError(f"leaf radius must be positive (got {self.radius})")
        norm = float(np.linalg.norm(self.normal))
        if not abs(norm - 1.0) <= UNIT_NORMAL_TOL:
            raise ValueError(f"leaf normal must have unit length (got norm {norm:g})")

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def projected_area(self, direction) -> float:
        """Area projected onto the plane perpendicular to ``direction``."""
        return self.area() * abs(float(np.dot(self.normal, direction)))
