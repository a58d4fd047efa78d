"""
Input/Output utilities for leaf disk scenes.

Includes:
- GList static-instance export
- Wavefront OBJ triangle-fan export
- Zenith histogram export (PNG)
"""

from .export import (
    # Scene export
    save_leaf_disks,
    write_glist_instance,
    write_obj_disk,
    output_format,
    GLIST_HEADER,
    GLIST_FOOTER,

    # Visualization
    save_zenith_hist_png,
    setup_matplotlib,
)

__all__ = [
    # Scene export
    "save_leaf_disks",
    "write_glist_instance",
    "write_obj_disk",
    "output_format",
    "GLIST_HEADER",
    "GLIST_FOOTER",

    # Visualization
    "save_zenith_hist_png",
    "setup_matplotlib",
]
