"""Leaf disk placement inside a canopy volume."""

import math
from typing import Iterator
from ..geometry.leaf_disk import LeafDisk


def count_leaves(volume, lai: float, radius: float) -> int:
    """Number of disks giving leaf area index ``lai`` over the XY footprint."""
    lai = float(lai)
    radius = float(radius)
    if not lai > 0:
        raise ValueError(f"LAI must be positive (got {lai})")
    if not radius > 0:
        raise ValueError(f"leaf radius must be positive (got {radius})")
    return int(lai * volume.footprint_area() / (math.pi * radius * radius))


def generate_leaf_disks(volume, distribution, lai: float, radius: float, rng) -> Iterator[LeafDisk]:
    """Yield leaf disks; each draws its position first, then its normal."""
    num_leaves = count_leaves(volume, lai, radius)
    for _ in range(num_leaves):
        pos = volume.sample_position(rng)
        normal = distribution.sample_normal(rng)
        yield LeafDisk(pos=pos, normal=normal, radius=float(radius))
