"""
run.py - Leaf disk canopy generator

Scatters flat circular leaf disks inside a canopy volume and writes them to a
GList scene (static disk instances) or a Wavefront OBJ mesh (triangle fans).

Pipeline:
──────────────────────────────────────────────────────────────────────
  config.yaml (optional) + command-line overrides
        │
        ▼
  Leaf angle distribution  ← "Uniform", "Trigonometric Planophile",
        │                    "VerhoefBimodal A B", "TrowbridgeReitz AX AY",
        │                    "Beckmann AX AY"
        ▼
  Volume (box / sphere / cylinder), leaf count = LAI · footprint / (π r²)
        │
        ▼
  For each leaf: position ← volume, normal ← distribution
        │
        ▼
  leaf.glist | leaf.obj  (+ optional zenith histogram PNG)

Configuration:
──────────────────────────────────────────────────────────────────────
YAML config structure (every key optional):
  seed: 0
  lai: 1.0
  radius: 0.1
  output: leaf.glist
  distribution: "Trigonometric Planophile"
  table_size: 256
  obj_resolution: 10
  volume: {type: box, from: [0, 0, 0], to: [1, 1, 1]}
          {type: sphere, center: [0, 0, 0], radius: 1}
          {type: cylinder, center: [0, 0, 0], radius: 1, height: 1}
  png: {enabled: false, path: null, dpi: 160, bins: 45}

Usage:
──────────────────────────────────────────────────────────────────────
python run.py "Trigonometric Erectophile" -l 3 -r 0.05 -o canopy.obj
python run.py -c config.yaml --seed 7 --png
python run.py "VerhoefBimodal 0.3 -0.2" --volume sphere --center "[0, 0, 1]" --volume-radius 1
"""

import sys
import argparse
from pathlib import Path
from typing import Dict, List, Optional

from leafdisk import (
    RandomSource,
    default_cfg,
    merge_cfg,
    load_config,
    parse_distribution,
    volume_from_cfg,
    count_leaves,
    generate_leaf_disks,
    save_leaf_disks,
    save_zenith_hist_png,
    IsotropicLeafAngleDistribution,
)
from leafdisk.io.export import output_format


# ============================================================================
# Argument Types
# ============================================================================
def _positive_float(flag: str):
    def parse(text: str) -> float:
        try:
            value = float(text)
        except ValueError:
            value = float("nan")
        if not value > 0:
            raise argparse.ArgumentTypeError(
                f"{flag} expects 1 positive float (can't parse {text})")
        return value
    return parse


def _integer(flag: str):
    def parse(text: str) -> int:
        try:
            return int(text)
        except ValueError:
            raise argparse.ArgumentTypeError(
                f"{flag} expects 1 integer (can't parse {text})") from None
    return parse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Leaf disk canopy generator")
    ap.add_argument("distribution", nargs="*",
                    help="Leaf angle distribution, e.g. \"Trigonometric Planophile\". By default, Uniform.")
    ap.add_argument("-c", "--config", type=str, default=None, help="Path to YAML config.")
    ap.add_argument("-s", "--seed", type=_integer("-s/--seed"), default=None,
                    help="Specify seed. By default, 0.")
    ap.add_argument("-l", "--lai", type=_positive_float("-l/--lai"), default=None,
                    help="Specify Leaf Area Index (LAI) with respect to XY. By default, 1.")
    ap.add_argument("-r", "--radius", type=_positive_float("-r/--radius"), default=None,
                    help="Specify leaf radius in meters. By default, 0.1.")
    ap.add_argument("-o", "--output", type=str, default=None,
                    help="Specify output filename (.glist or .obj). By default, \"leaf.glist\".")
    ap.add_argument("--table-size", type=_integer("--table-size"), default=None,
                    help="LIDF table resolution for tabulated laws. By default, 256.")
    ap.add_argument("--obj-resolution", type=_integer("--obj-resolution"), default=None,
                    help="Rim vertices per disk in OBJ output. By default, 10.")

    vol = ap.add_argument_group("volume")
    vol.add_argument("--volume", choices=["box", "sphere", "cylinder"], default=None,
                     help="Volume type. By default, box.")
    vol.add_argument("--from", dest="box_from", type=str, default=None,
                     help="Box corner position. By default, \"[0, 0, 0]\".")
    vol.add_argument("--to", dest="box_to", type=str, default=None,
                     help="Box corner position. By default, \"[1, 1, 1]\".")
    vol.add_argument("--center", type=str, default=None,
                     help="Sphere center or cylinder base center. By default, \"[0, 0, 0]\".")
    vol.add_argument("--volume-radius", type=_positive_float("--volume-radius"), default=None,
                     help="Sphere or cylinder radius. By default, 1.")
    vol.add_argument("--height", type=_positive_float("--height"), default=None,
                     help="Cylinder height. By default, 1.")

    ap.add_argument("--png", action="store_true", help="Export zenith histogram PNG.")
    ap.add_argument("--png-dpi", type=int, default=None)
    return ap


# ============================================================================
# Configuration
# ============================================================================
def resolve_config(args: argparse.Namespace) -> Dict:
    """Defaults, then YAML config, then explicit command-line values."""
    cfg = default_cfg()
    if args.config:
        print(f"[Config] Loading {args.config}")
        user_cfg, _ = load_config(args.config)
        cfg = merge_cfg(cfg, user_cfg)

    overrides = {
        "seed": args.seed,
        "lai": args.lai,
        "radius": args.radius,
        "output": args.output,
        "table_size": args.table_size,
        "obj_resolution": args.obj_resolution,
    }
    if args.distribution:
        overrides["distribution"] = " ".join(args.distribution)
    for key, val in overrides.items():
        if val is not None:
            cfg[key] = val

    volume_overrides = {
        "type": args.volume,
        "from": args.box_from,
        "to": args.box_to,
        "center": args.center,
        "radius": args.volume_radius,
        "height": args.height,
    }
    for key, val in volume_overrides.items():
        if val is not None:
            cfg["volume"][key] = val

    if args.png:
        cfg["png"]["enabled"] = True
    if args.png_dpi is not None:
        cfg["png"]["dpi"] = args.png_dpi
    return cfg


# ============================================================================
# Generation
# ============================================================================
def generate(cfg: Dict) -> int:
    """Generate and write the canopy described by ``cfg``; returns the leaf count."""
    output = Path(cfg["output"])
    output_format(output)

    rng = RandomSource(int(cfg["seed"]))
    distribution = parse_distribution(str(cfg["distribution"]), int(cfg["table_size"]))
    volume = volume_from_cfg(cfg["volume"])
    lai = float(cfg["lai"])
    radius = float(cfg["radius"])

    print(f"[Init] Distribution: {distribution!r}")
    print(f"[Init] Volume: {volume!r}")
    num_leaves = count_leaves(volume, lai, radius)
    print(f"[Init] LAI={lai:g}, radius={radius:g} -> {num_leaves} leaves")
    if num_leaves == 0:
        print("[WARN] Volume footprint too small for one leaf; writing an empty scene.")

    png_cfg = cfg.get("png", {}) or {}
    normals: List = []

    def keep_normals(disks):
        for disk in disks:
            normals.append(disk.normal)
            yield disk

    disks = generate_leaf_disks(volume, distribution, lai, radius, rng)
    if png_cfg.get("enabled", False):
        disks = keep_normals(disks)

    count = save_leaf_disks(output, disks, int(cfg["obj_resolution"]))
    print(f"[Export] Wrote {count} leaves to {output}")

    if png_cfg.get("enabled", False):
        png_path = Path(png_cfg.get("path") or output.with_name(output.stem + "_zenith.png"))
        lidf = None
        if isinstance(distribution, IsotropicLeafAngleDistribution):
            lidf = distribution.lidf
        save_zenith_hist_png(png_path, normals, lidf=lidf,
                             bins=int(png_cfg.get("bins", 45)), dpi=int(png_cfg.get("dpi", 160)))
        print(f"[Export] Saved zenith histogram to {png_path}")

    return count


# ============================================================================
# Main Function
# ============================================================================
def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    try:
        cfg = resolve_config(args)
        generate(cfg)
    except (ValueError, RuntimeError, OSError) as e:
        print("Unhandled exception in command line arguments!", file=sys.stderr)
        print(f"exception: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
