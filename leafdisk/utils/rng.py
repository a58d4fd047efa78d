"""Seeded canonical random source shared by every sampler."""

from typing import Tuple
import torch


class RandomSource:
    """Sequential stream of uniform [0, 1) and standard normal variates.

    Backed by a ``torch.Generator`` seeded with ``manual_seed``; all draws are
    float64. A source is a single mutable stream and is not meant to be shared
    between concurrent callers.
    """

    def __init__(self, seed: int = 0):
        self.seed = int(seed)
        self.generator = torch.Generator(device="cpu").manual_seed(self.seed)

    def next_float(self) -> float:
        """Next uniform scalar in [0, 1)."""
        return torch.rand(1, generator=self.generator, dtype=torch.float64).item()

    def next_tuple(self, k: int) -> Tuple[float, ...]:
        """Next uniform k-tuple in [0, 1)^k."""
        u = torch.rand(int(k), generator=self.generator, dtype=torch.float64)
        return tuple(u.tolist())

    def next_normal(self) -> float:
        """Next standard normal variate."""
        return torch.randn(1, generator=self.generator, dtype=torch.float64).item()
