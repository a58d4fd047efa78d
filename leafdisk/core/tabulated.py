"""Tabulated zenith CDF with inverse lookup by binary search."""

import math
import numpy as np
from typing import Callable
from ..utils.config import DEFAULT_TABLE_SIZE

HALF_PI = 0.5 * math.pi


def build_cdf_table(lidf: Callable[[float], float], n: int = DEFAULT_TABLE_SIZE) -> np.ndarray:
    """Sample ``lidf`` at n equally spaced zenith angles over [0, pi/2].

    The first and last entries are pinned to exactly 0 and 1. Interior
    entries are clipped into [0, 1] and made non-decreasing.
    """
    n = int(n)
    if n <= 2:
        raise ValueError(f"CDF table needs more than 2 entries (got {n})")

    table = np.empty(n, dtype=np.float64)
    for k in range(1, n - 1):
        table[k] = lidf(k / (n - 1) * HALF_PI)
    table[0] = 0.0
    table[n - 1] = 1.0
    np.clip(table, 0.0, 1.0, out=table)
    return np.maximum.accumulate(table)


class TabulatedCDF:
    """Immutable CDF table over theta in [0, pi/2] with linear inverse lookup."""

    def __init__(self, lidf: Callable[[float], float], n: int = DEFAULT_TABLE_SIZE):
        table = build_cdf_table(lidf, n)
        table.flags.writeable = False
        self.table = table

    def __len__(self) -> int:
        return len(self.table)

    def invert(self, u: float) -> float:
        """Zenith angle theta with F(theta) = u, linear in the table index."""
        table = self.table
        n = len(table)
        if u >= table[-1]:
            return HALF_PI
        hit = int(np.searchsorted(table, u, side="left"))
        if hit == 0:
            return 0.0

        k0 = hit - 1
        k1 = hit
        denom = table[k1] - table[k0]
        if denom > 0.0:
            fac = (u - table[k0]) / denom
        else:
            # Flat run: no interpolation.
            fac = 1.0
        return ((1.0 - fac) * k0 + fac * k1) / (n - 1) * HALF_PI
