"""
Canopy geometry: volumes and leaf disks.
"""

from .volume import (
    BoxVolume,
    SphereVolume,
    CylinderVolume,
    volume_from_cfg,
)
from .leaf_disk import LeafDisk

__all__ = [
    "BoxVolume",
    "SphereVolume",
    "CylinderVolume",
    "volume_from_cfg",
    "LeafDisk",
]
