"""Build a leaf angle distribution from its textual description.

Grammar (names are case-insensitive, tokens are whitespace separated)::

    Uniform
    Trigonometric TYPE        TYPE in Planophile, Erectophile, Plagiophile,
                              Extremophile, Spherical
    VerhoefBimodal A B        |A| + |B| <= 1
    TrowbridgeReitz AX AY     AX, AY > 0
    Beckmann AX AY            AX, AY > 0
"""

import math
from typing import List, Tuple
from ..utils.config import DEFAULT_TABLE_SIZE
from .distributions import (
    LeafAngleDistribution,
    UniformLeafAngleDistribution,
    TrowbridgeReitzLeafAngleDistribution,
    BeckmannLeafAngleDistribution,
    trigonometric_distribution,
    verhoef_bimodal_distribution,
)
from .lidf import TRIGONOMETRIC_LIDFS

TRIGONOMETRIC_USAGE = (
    "format is 'Trigonometric TYPE' where TYPE is 'Planophile', 'Erectophile', "
    "'Plagiophile', 'Extremophile', or 'Spherical'")

VERHOEF_USAGE = (
    "format is 'VerhoefBimodal A B' where A and B are floating point numbers "
    "satisfying |A| + |B| <= 1")

MICROFACET_USAGE = (
    "format is '{name} ALPHAX ALPHAY' where ALPHAX and ALPHAY are positive "
    "floating point numbers")

DISTRIBUTION_NAMES = ("Uniform", "Trigonometric", "VerhoefBimodal", "TrowbridgeReitz", "Beckmann")


def _two_floats(tokens: List[str], usage: str) -> Tuple[float, float]:
    if len(tokens) < 2:
        raise ValueError(usage)
    try:
        x, y = float(tokens[0]), float(tokens[1])
    except ValueError:
        raise ValueError(usage) from None
    if not (math.isfinite(x) and math.isfinite(y)):
        raise ValueError(usage)
    return x, y


def parse_distribution(args: str, table_size: int = DEFAULT_TABLE_SIZE) -> LeafAngleDistribution:
    """Parse e.g. ``"VerhoefBimodal 0.3 0.2"`` into a distribution."""
    tokens = str(args).split()
    if not tokens:
        raise ValueError(
            "empty leaf angle distribution, expected one of " + ", ".join(DISTRIBUTION_NAMES))

    name, rest = tokens[0], tokens[1:]
    key = name.lower()

    if key == "uniform":
        return UniformLeafAngleDistribution()

    if key == "trigonometric":
        if not rest or rest[0].lower() not in TRIGONOMETRIC_LIDFS:
            raise ValueError(TRIGONOMETRIC_USAGE)
        return trigonometric_distribution(rest[0], table_size)

    if key == "verhoefbimodal":
        a, b = _two_floats(rest, VERHOEF_USAGE)
        if not (abs(a) + abs(b) <= 1.0):
            raise ValueError(VERHOEF_USAGE)
        return verhoef_bimodal_distribution(a, b, table_size)

    if key in ("trowbridgereitz", "beckmann"):
        canonical = "TrowbridgeReitz" if key == "trowbridgereitz" else "Beckmann"
        usage = MICROFACET_USAGE.format(name=canonical)
        alphax, alphay = _two_floats(rest, usage)
        if not (alphax > 0 and alphay > 0):
            raise ValueError(usage)
        if canonical == "TrowbridgeReitz":
            return TrowbridgeReitzLeafAngleDistribution(alphax, alphay)
        return BeckmannLeafAngleDistribution(alphax, alphay)

    raise ValueError(f"unknown name \"{name}\"")
