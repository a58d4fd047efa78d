# test_distributions.py
# ============================================================================
# Leaf angle distributions: unit normals, boundaries, zenith laws
# ============================================================================
import math
import numpy as np
import pytest

from leafdisk.core.distributions import (
    UniformLeafAngleDistribution,
    IsotropicLeafAngleDistribution,
    TrowbridgeReitzLeafAngleDistribution,
    BeckmannLeafAngleDistribution,
    trigonometric_distribution,
    verhoef_bimodal_distribution,
    trowbridge_reitz_slope,
)
from leafdisk.core.lidf import TRIGONOMETRIC_LIDFS, spherical_lidf
from leafdisk.analysis import zenith_angles, ks_distance, empirical_cdf
from leafdisk.utils import RandomSource


class SequenceSource:
    """Replays fixed uniform draws."""

    def __init__(self, values):
        self.values = list(values)

    def next_float(self):
        return self.values.pop(0)

    def next_tuple(self, k):
        return tuple(self.next_float() for _ in range(k))

    def next_normal(self):
        return self.next_float()


def all_distributions():
    dists = [UniformLeafAngleDistribution()]
    dists += [trigonometric_distribution(kind) for kind in sorted(TRIGONOMETRIC_LIDFS)]
    dists.append(verhoef_bimodal_distribution(0.3, -0.2))
    dists.append(TrowbridgeReitzLeafAngleDistribution(0.5, 0.2))
    dists.append(BeckmannLeafAngleDistribution(0.3, 0.8))
    return dists


def tabulated_distributions():
    dists = [trigonometric_distribution(kind) for kind in sorted(TRIGONOMETRIC_LIDFS)]
    dists.append(verhoef_bimodal_distribution(0.3, -0.2))
    dists.append(verhoef_bimodal_distribution(-0.6, 0.4))
    return dists


@pytest.mark.parametrize("dist", all_distributions(), ids=repr)
def test_normals_are_unit_length(dist):
    rng = RandomSource(seed=11)
    normals = dist.sample_normals(rng, 10000)
    assert normals.shape == (10000, 3)
    assert np.all(np.isfinite(normals))
    assert np.allclose(np.linalg.norm(normals, axis=1), 1.0, atol=1e-9)
    assert np.all(normals[:, 2] >= 0.0)


@pytest.mark.parametrize("dist", tabulated_distributions(), ids=repr)
def test_tabulated_zero_draw_points_up(dist):
    n = dist.sample_normal(SequenceSource([0.0, 0.37]))
    assert np.allclose(n, [0.0, 0.0, 1.0])


@pytest.mark.parametrize("dist", tabulated_distributions(), ids=repr)
def test_tabulated_unit_draw_lies_flat(dist):
    n = dist.sample_normal(SequenceSource([1.0, 0.25]))
    # theta = pi/2, phi = pi/2
    assert n == pytest.approx([0.0, 1.0, 0.0], abs=1e-12)


def test_tabulated_azimuth_is_two_pi_u1():
    dist = trigonometric_distribution("planophile")
    u0 = 0.4
    theta = dist.cdf.invert(u0)
    n = dist.sample_normal(SequenceSource([u0, 0.125]))
    phi = 2.0 * math.pi * 0.125
    assert n == pytest.approx([math.sin(theta) * math.cos(phi), math.sin(theta) * math.sin(phi), math.cos(theta)])


def test_uniform_matches_sine_weighted_zenith():
    rng = RandomSource(seed=5)
    normals = UniformLeafAngleDistribution().sample_normals(rng, 20000)
    thetas = zenith_angles(normals)
    assert ks_distance(thetas, spherical_lidf) < 0.015


@pytest.mark.parametrize("kind", ["planophile", "erectophile", "plagiophile", "extremophile"])
def test_trigonometric_samples_follow_law(kind):
    rng = RandomSource(seed=21)
    normals = trigonometric_distribution(kind).sample_normals(rng, 10000)
    assert ks_distance(zenith_angles(normals), TRIGONOMETRIC_LIDFS[kind]) < 0.02


def test_azimuth_is_uniform():
    rng = RandomSource(seed=8)
    normals = trigonometric_distribution("erectophile").sample_normals(rng, 20000)
    phi = np.mod(np.arctan2(normals[:, 1], normals[:, 0]), 2.0 * np.pi)
    counts, _ = np.histogram(phi, bins=8, range=(0.0, 2.0 * np.pi))
    assert np.all(np.abs(counts / len(phi) - 1.0 / 8.0) < 0.015)


def test_isotropic_accepts_custom_lidf():
    dist = IsotropicLeafAngleDistribution(lambda t: t / (0.5 * math.pi), 32, name="Linear")
    assert dist.table[0] == 0.0 and dist.table[-1] == 1.0
    assert dist.name == "Linear"


def test_same_seed_same_normals():
    dist = verhoef_bimodal_distribution(0.2, 0.4)
    a = dist.sample_normals(RandomSource(seed=42), 100)
    b = dist.sample_normals(RandomSource(seed=42), 100)
    c = dist.sample_normals(RandomSource(seed=43), 100)
    assert np.array_equal(a, b)
    assert not np.array_equal(a, c)


@pytest.mark.parametrize("cls", [TrowbridgeReitzLeafAngleDistribution, BeckmannLeafAngleDistribution])
def test_microfacet_near_zero_roughness_points_up(cls):
    rng = RandomSource(seed=2)
    normals = cls(1e-6, 1e-6).sample_normals(rng, 10000)
    angles = zenith_angles(normals)
    assert np.all(angles < 1e-2)
    assert np.median(angles) < 1e-5


@pytest.mark.parametrize("cls", [TrowbridgeReitzLeafAngleDistribution, BeckmannLeafAngleDistribution])
def test_microfacet_rejects_non_positive_roughness(cls):
    with pytest.raises(ValueError):
        cls(0.0, 1.0)
    with pytest.raises(ValueError):
        cls(1.0, -0.5)


def test_microfacet_anisotropy_spreads_along_larger_alpha():
    rng = RandomSource(seed=9)
    normals = BeckmannLeafAngleDistribution(0.8, 0.05).sample_normals(rng, 5000)
    assert np.std(normals[:, 0]) > 5.0 * np.std(normals[:, 1])


def test_trowbridge_reitz_slope_boundaries():
    assert trowbridge_reitz_slope(0.5) == 0.0
    assert trowbridge_reitz_slope(0.25) < 0.0 < trowbridge_reitz_slope(0.75)
    assert trowbridge_reitz_slope(0.25) == pytest.approx(-trowbridge_reitz_slope(0.75))
    for u in (0.0, 1.0):
        assert math.isfinite(trowbridge_reitz_slope(u))
    assert trowbridge_reitz_slope(0.0) < 0.0 < trowbridge_reitz_slope(1.0)


def test_trowbridge_reitz_boundary_draws_give_unit_normals():
    dist = TrowbridgeReitzLeafAngleDistribution(1.0, 1.0)
    for u in [(0.0, 0.0), (1.0, 0.5), (0.5, 0.5), (0.0, 1.0)]:
        n = dist.sample_normal(SequenceSource(u))
        assert np.all(np.isfinite(n))
        assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.allclose(dist.sample_normal(SequenceSource([0.5, 0.5])), [0.0, 0.0, 1.0])


def test_beckmann_uses_slope_signs():
    dist = BeckmannLeafAngleDistribution(1.0, 1.0)
    n = dist.sample_normal(SequenceSource([1.0, -2.0]))
    expected = np.array([-1.0, 2.0, 1.0]) / math.sqrt(6.0)
    assert n == pytest.approx(expected)


def test_empirical_cdf_tracks_verhoef_law():
    dist = verhoef_bimodal_distribution(-0.35, -0.15)
    thetas = zenith_angles(dist.sample_normals(RandomSource(seed=12), 10000))
    grid = np.linspace(0.0, 0.5 * math.pi, 19)
    expected = np.array([dist.lidf(t) for t in grid])
    expected[0], expected[-1] = 0.0, 1.0
    assert np.max(np.abs(empirical_cdf(thetas, grid) - expected)) < 0.02
