"""File export utilities (GList, OBJ, PNG)."""

import math
import numpy as np
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO
from ..core.direction import build_onb
from ..utils.config import MIN_OBJ_RESOLUTION
from ..analysis.lidf_stats import zenith_angles, lidf_density

GLIST_HEADER = (
    "<geometrylist enabled=\"true\">\n"
    "<object>\n"
    "<basegeometry>\n"
    "<disk><matid>100</matid></disk>\n"
    "</basegeometry>\n"
)

GLIST_FOOTER = (
    "</object>\n"
    "</geometrylist>\n"
)


def _fmt(x) -> str:
    return f"{float(x):g}"


def setup_matplotlib():
    """Setup matplotlib for non-interactive mode."""
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    return plt


def write_glist_instance(f: TextIO, disk) -> None:
    """Write one disk as a static instance with a 3x4 affine transform."""
    tbn = build_onb(disk.normal)
    values = []
    for j in range(3):
        values += [disk.radius * tbn[j][0], disk.radius * tbn[j][1], disk.radius * tbn[j][2], disk.pos[j]]
    f.write("<staticinstance><matrix>")
    f.write(", ".join(_fmt(v) for v in values))
    f.write(", 0, 0, 0, 1</matrix></staticinstance>\n")


def write_obj_disk(f: TextIO, disk, ver_offset: int, ver_res: int = 10) -> int:
    """Write one disk as a triangle fan; returns the bumped vertex offset."""
    ver_res = max(int(ver_res), MIN_OBJ_RESOLUTION)
    tbn = build_onb(disk.normal)
    hatu, hatv = tbn[:, 0], tbn[:, 1]
    pos = np.asarray(disk.pos, dtype=np.float64)

    f.write(f"v {_fmt(pos[0])} {_fmt(pos[1])} {_fmt(pos[2])}\n")
    for j in range(ver_res):
        phi = j / ver_res * 2.0 * math.pi
        ver = (disk.radius * math.cos(phi)) * hatu + (disk.radius * math.sin(phi)) * hatv + pos
        f.write(f"v {_fmt(ver[0])} {_fmt(ver[1])} {_fmt(ver[2])}\n")

    for j in range(ver_res):
        v0 = ver_offset
        v1 = 1 + j % ver_res + ver_offset
        v2 = 1 + (j + 1) % ver_res + ver_offset
        f.write(f"f {v0 + 1} {v1 + 1} {v2 + 1}\n")

    return ver_offset + ver_res + 1


def output_format(path) -> str:
    """'glist' or 'obj' from the file extension."""
    suffix = Path(path).suffix.lower()
    if suffix == ".glist":
        return "glist"
    if suffix == ".obj":
        return "obj"
    raise ValueError("output filename must end with either \".glist\" or \".obj\"")


def save_leaf_disks(path, disks: Iterable, obj_resolution: int = 10) -> int:
    """Write disks to GList or OBJ (by extension); returns the disk count."""
    fmt = output_format(path)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with path.open("w", encoding="utf-8") as f:
        if fmt == "glist":
            f.write(GLIST_HEADER)
            for disk in disks:
                write_glist_instance(f, disk)
                count += 1
            f.write(GLIST_FOOTER)
        else:
            ver_offset = 0
            for disk in disks:
                ver_offset = write_obj_disk(f, disk, ver_offset, obj_resolution)
                count += 1
    return count


def save_zenith_hist_png(path, normals, lidf: Optional[Callable[[float], float]] = None,
                         bins: int = 45, dpi: int = 160, title: str = "Leaf Zenith Distribution"):
    """Save zenith-angle histogram, with the analytic density overlaid if given."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    thetas = np.degrees(zenith_angles(normals)) if len(normals) else np.empty(0)
    plt = setup_matplotlib()

    if thetas.size == 0:
        fig = plt.figure(figsize=(3, 3))
        fig.text(0.5, 0.5, "No leaves", ha="center")
        fig.savefig(path, dpi=dpi, bbox_inches="tight")
        plt.close(fig)
        return

    fig, ax = plt.subplots(figsize=(6, 4))
    ax.hist(thetas, bins=int(bins), range=(0.0, 90.0), density=True, alpha=0.85, label="sampled")
    if lidf is not None:
        grid = np.linspace(0.0, 0.5 * np.pi, 181)
        # density per degree
        ax.plot(np.degrees(grid), lidf_density(lidf, grid) * np.pi / 180.0, "k-", lw=1.2, label="LIDF")
        ax.legend()
    ax.set_xlim(0.0, 90.0)
    ax.set_xlabel("Zenith angle (deg)")
    ax.set_ylabel("Density")
    ax.set_title(title)
    fig.tight_layout()
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)
