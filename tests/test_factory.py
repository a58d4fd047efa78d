# test_factory.py
# ============================================================================
# Textual factory: "Name [params]" -> leaf angle distribution
# ============================================================================
import numpy as np
import pytest

from leafdisk.core.factory import parse_distribution
from leafdisk.core.distributions import (
    UniformLeafAngleDistribution,
    IsotropicLeafAngleDistribution,
    TrowbridgeReitzLeafAngleDistribution,
    BeckmannLeafAngleDistribution,
    trigonometric_distribution,
    verhoef_bimodal_distribution,
)
from leafdisk.core.tabulated import build_cdf_table
from leafdisk.core.lidf import planophile_lidf


def test_uniform():
    assert isinstance(parse_distribution("Uniform"), UniformLeafAngleDistribution)
    assert isinstance(parse_distribution("  uNiFoRm  "), UniformLeafAngleDistribution)


def test_planophile_table_matches_closed_form():
    dist = parse_distribution("Trigonometric Planophile")
    assert isinstance(dist, IsotropicLeafAngleDistribution)
    assert np.array_equal(dist.table, build_cdf_table(planophile_lidf))
    assert np.array_equal(dist.table, trigonometric_distribution("planophile").table)


@pytest.mark.parametrize("kind", ["Planophile", "ERECTOPHILE", "plagiophile", "Extremophile", "spherical"])
def test_trigonometric_types_case_insensitive(kind):
    dist = parse_distribution(f"trigonometric {kind}")
    assert np.array_equal(dist.table, trigonometric_distribution(kind).table)


def test_verhoef_bimodal():
    dist = parse_distribution("VerhoefBimodal 0.5 -0.5")
    assert isinstance(dist, IsotropicLeafAngleDistribution)
    assert np.array_equal(dist.table, verhoef_bimodal_distribution(0.5, -0.5).table)


def test_microfacet():
    tr = parse_distribution("TrowbridgeReitz 0.2 0.4")
    assert isinstance(tr, TrowbridgeReitzLeafAngleDistribution)
    assert (tr.alphax, tr.alphay) == (0.2, 0.4)
    bk = parse_distribution("beckmann 1e-3 2")
    assert isinstance(bk, BeckmannLeafAngleDistribution)
    assert (bk.alphax, bk.alphay) == (1e-3, 2.0)


def test_table_size_is_threaded():
    assert len(parse_distribution("Trigonometric Spherical", table_size=64).table) == 64
    assert len(parse_distribution("VerhoefBimodal 0 0", table_size=17).table) == 17


def test_verhoef_out_of_range_fails():
    with pytest.raises(ValueError, match=r"\|A\| \+ \|B\| <= 1"):
        parse_distribution("VerhoefBimodal 0.6 0.6")


def test_beckmann_negative_alpha_fails():
    with pytest.raises(ValueError, match="Beckmann ALPHAX ALPHAY"):
        parse_distribution("Beckmann -1 1")


def test_unknown_name_fails():
    with pytest.raises(ValueError, match='unknown name "Unknown"'):
        parse_distribution("Unknown")


@pytest.mark.parametrize("args", [
    "",
    "   ",
    "Trigonometric",
    "Trigonometric Foliophile",
    "VerhoefBimodal 0.1",
    "VerhoefBimodal a b",
    "VerhoefBimodal nan 0",
    "TrowbridgeReitz 0 1",
    "TrowbridgeReitz 1",
    "Beckmann 1 inf",
    "Beckmann nan 1",
])
def test_malformed_input_fails(args):
    with pytest.raises(ValueError):
        parse_distribution(args)


def test_trigonometric_usage_names_all_types():
    with pytest.raises(ValueError) as err:
        parse_distribution("Trigonometric Foliophile")
    for kind in ("Planophile", "Erectophile", "Plagiophile", "Extremophile", "Spherical"):
        assert kind in str(err.value)
