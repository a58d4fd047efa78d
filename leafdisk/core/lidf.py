"""Leaf inclination distribution functions (zenith-angle CDFs).

Each law maps a zenith angle theta in [0, pi/2] to F(theta) in [0, 1]. They
are evaluated once per table entry when a tabulated distribution is built,
never at sampling time.
"""

import math
from typing import Callable, Dict
from ..utils.config import VERHOEF_TOL, VERHOEF_MAX_ITER

HALF_PI = 0.5 * math.pi


def planophile_lidf(theta: float) -> float:
    """Mostly horizontal leaves."""
    return (theta + math.sin(2.0 * theta) / 2.0) / HALF_PI


def erectophile_lidf(theta: float) -> float:
    """Mostly vertical leaves."""
    return (theta - math.sin(2.0 * theta) / 2.0) / HALF_PI


def plagiophile_lidf(theta: float) -> float:
    """Mostly oblique leaves (mode near 45 degrees)."""
    return (theta - math.sin(4.0 * theta) / 4.0) / HALF_PI


def extremophile_lidf(theta: float) -> float:
    """Mostly horizontal or vertical leaves, few oblique ones."""
    return (theta + math.sin(4.0 * theta) / 4.0) / HALF_PI


def spherical_lidf(theta: float) -> float:
    """Leaf normals uniform over the hemisphere."""
    return 1.0 - math.cos(theta)


TRIGONOMETRIC_LIDFS: Dict[str, Callable[[float], float]] = {
    "planophile": planophile_lidf,
    "erectophile": erectophile_lidf,
    "plagiophile": plagiophile_lidf,
    "extremophile": extremophile_lidf,
    "spherical": spherical_lidf,
}


def check_verhoef_params(a: float, b: float) -> None:
    """Raise ValueError unless |a| + |b| <= 1."""
    if not (abs(a) + abs(b) <= 1.0):
        raise ValueError(
            f"Verhoef bimodal coefficients must satisfy |a| + |b| <= 1 (got a={a}, b={b})")


def verhoef_bimodal_lidf(theta: float, a: float, b: float,
                         tol: float = VERHOEF_TOL,
                         max_iter: int = VERHOEF_MAX_ITER) -> float:
    """Verhoef bimodal LIDF, solved by damped fixed-point iteration.

    ``a`` controls the average slope and ``b`` the bimodality. Solves
    ``x = a sin(x) + b sin(2x)/2 + 2 theta`` for x starting at ``2 theta``
    and returns ``(y + theta) / (pi/2)`` with ``y = a sin(x) + b sin(2x)/2``.

    Raises RuntimeError if the update does not drop below ``tol`` within
    ``max_iter`` iterations.
    """
    a = float(a)
    b = float(b)
    theta = float(theta)
    x = 2.0 * theta
    for _ in range(int(max_iter)):
        y = a * math.sin(x) + b * (math.sin(2.0 * x) / 2.0)
        dx = (y - x + 2.0 * theta) / 2.0
        if abs(dx) < tol:
            return (y + theta) / HALF_PI
        x += dx
    raise RuntimeError(
        f"Verhoef bimodal LIDF did not converge at theta={theta} "
        f"(a={a}, b={b}) after {max_iter} iterations")


def make_verhoef_lidf(a: float, b: float) -> Callable[[float], float]:
    """Validate (a, b) and bind them into a one-argument LIDF."""
    check_verhoef_params(a, b)

    def lidf(theta: float) -> float:
        return verhoef_bimodal_lidf(theta, a, b)

    return lidf
