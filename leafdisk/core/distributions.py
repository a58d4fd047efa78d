"""Leaf angle distributions: samplers of leaf surface normals."""

import math
import numpy as np
from abc import ABC, abstractmethod
from typing import Callable, Optional
from ..utils.config import DEFAULT_TABLE_SIZE, EPS_UNIT
from ..utils.utils import normalize
from .direction import uniform_hemisphere_sample
from .lidf import TRIGONOMETRIC_LIDFS, make_verhoef_lidf
from .tabulated import TabulatedCDF


class LeafAngleDistribution(ABC):
    """Capability: draw a unit leaf normal from a random source."""

    name = "LeafAngleDistribution"

    @abstractmethod
    def sample_normal(self, rng) -> np.ndarray:
        """Sample a unit normal, shape (3,)."""

    def sample_normals(self, rng, count: int) -> np.ndarray:
        """Sample ``count`` normals in sequence, shape (count, 3)."""
        out = np.empty((int(count), 3), dtype=np.float64)
        for i in range(out.shape[0]):
            out[i] = self.sample_normal(rng)
        return out

    def __repr__(self):
        return f"{type(self).__name__}()"


class UniformLeafAngleDistribution(LeafAngleDistribution):
    """Normals uniform over the upper hemisphere."""

    name = "Uniform"

    def sample_normal(self, rng) -> np.ndarray:
        return uniform_hemisphere_sample(rng.next_tuple(2))


class IsotropicLeafAngleDistribution(LeafAngleDistribution):
    """Zenith drawn from a tabulated LIDF, azimuth uniform.

    The LIDF is tabulated once at construction; sampling inverts the table
    and never calls ``lidf`` again.
    """

    def __init__(self, lidf: Callable[[float], float], n: int = DEFAULT_TABLE_SIZE,
                 name: str = "Isotropic"):
        self.name = name
        self.lidf = lidf
        self.cdf = TabulatedCDF(lidf, n)

    @property
    def table(self) -> np.ndarray:
        return self.cdf.table

    def sample_normal(self, rng) -> np.ndarray:
        u0 = rng.next_float()
        u1 = rng.next_float()

        theta = self.cdf.invert(u0)
        sin_theta = math.sin(theta)
        cos_theta = math.cos(theta)

        phi = 2.0 * math.pi * u1
        return np.array([sin_theta * math.cos(phi), sin_theta * math.sin(phi), cos_theta])

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, n={len(self.cdf)})"


def trigonometric_distribution(kind: str, n: int = DEFAULT_TABLE_SIZE) -> IsotropicLeafAngleDistribution:
    """Planophile, erectophile, plagiophile, extremophile or spherical law."""
    key = str(kind).lower()
    if key not in TRIGONOMETRIC_LIDFS:
        raise ValueError(f"unknown trigonometric type \"{kind}\"")
    return IsotropicLeafAngleDistribution(
        TRIGONOMETRIC_LIDFS[key], n, name=f"Trigonometric {key.capitalize()}")


def verhoef_bimodal_distribution(a: float, b: float, n: int = DEFAULT_TABLE_SIZE) -> IsotropicLeafAngleDistribution:
    """Verhoef bimodal law; raises ValueError unless |a| + |b| <= 1."""
    lidf = make_verhoef_lidf(float(a), float(b))
    return IsotropicLeafAngleDistribution(lidf, n, name=f"VerhoefBimodal {a} {b}")


class MicrofacetLeafAngleDistribution(LeafAngleDistribution):
    """Normals perturbed in slope space, local frame with +Z up."""

    def __init__(self, alphax: float = 1.0, alphay: float = 1.0):
        alphax = float(alphax)
        alphay = float(alphay)
        if not (alphax > 0 and alphay > 0):
            raise ValueError(
                f"{self.name} roughness must be positive (got alphax={alphax}, alphay={alphay})")
        self.alphax = alphax
        self.alphay = alphay

    @abstractmethod
    def sample_slope(self, rng) -> np.ndarray:
        """Sample a slope-space pair (mx, my)."""

    def sample_normal(self, rng) -> np.ndarray:
        m = self.sample_slope(rng)
        return normalize([-self.alphax * m[0], -self.alphay * m[1], 1.0])

    def __repr__(self):
        return f"{type(self).__name__}(alphax={self.alphax}, alphay={self.alphay})"


def trowbridge_reitz_slope(u: float, eps: Optional[float] = None) -> float:
    """Slope for one axis from a uniform sample, sign taken from u - 1/2.

    u is clamped into [eps, 1 - eps] so the endpoints stay finite; u = 1/2
    gives slope 0.
    """
    eps = EPS_UNIT if eps is None else eps
    u = min(max(float(u), eps), 1.0 - eps)
    radicand = -1.0 - 1.0 / (4.0 * u * (u - 1.0))
    return math.copysign(math.sqrt(max(radicand, 0.0)), u - 0.5)


class TrowbridgeReitzLeafAngleDistribution(MicrofacetLeafAngleDistribution):
    """Trowbridge-Reitz (GGX) slope distribution."""

    name = "TrowbridgeReitz"

    def sample_slope(self, rng) -> np.ndarray:
        u = rng.next_tuple(2)
        return np.array([trowbridge_reitz_slope(u[0]), trowbridge_reitz_slope(u[1])])


class BeckmannLeafAngleDistribution(MicrofacetLeafAngleDistribution):
    """Beckmann (Gaussian) slope distribution."""

    name = "Beckmann"

    def sample_slope(self, rng) -> np.ndarray:
        mx = rng.next_normal()
        my = rng.next_normal()
        return np.array([mx, my])
