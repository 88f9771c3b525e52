import math

import pytest

from nbr_beam.models import materials, units
from nbr_beam.models.nbr_constants import NBR6118, SafetyFactors


@pytest.mark.parametrize("fck, expected", [(25, 2.565), (30, 2.896), (50, 4.072)])
def test_fctm_group_one(fck, expected):
    assert materials.fctm(fck) == pytest.approx(expected, abs=1e-3)


def test_fctm_group_two_uses_log_law():
    assert materials.fctm(60) == pytest.approx(2.12 * math.log(1 + 0.11 * 60))


def test_design_strengths_converted_to_kn_cm2():
    assert materials.fcd(25) == pytest.approx(25 / 1.4 / 10)
    assert materials.fyd(500) == pytest.approx(43.478, abs=1e-3)
    assert materials.fctd(25) == pytest.approx(0.7 * materials.fctm(25) / 1.4 / 10)


def test_custom_safety_factors():
    factors = SafetyFactors(gamma_c=1.5, gamma_s=1.0)
    assert materials.fcd(30, factors) == pytest.approx(2.0)
    assert materials.fyd(500, factors) == pytest.approx(50.0)
    assert NBR6118.gamma_f == 1.4


def test_bar_area():
    assert materials.bar_area(10.0) == pytest.approx(0.7854, abs=1e-4)
    assert materials.bar_area(20.0) == pytest.approx(4 * materials.bar_area(10.0))


def test_unit_conversions():
    assert units.MPa_to_kN_cm2(25) == 2.5
    assert units.kN_cm2_to_MPa(2.5) == 25
    assert units.tf_to_kN(8) == 80
    assert units.tfm_to_kNcm(8) == 8000
    assert units.kNcm_to_kNm(11200) == 112
    assert units.kNcm_to_tfm(2864.7) == pytest.approx(2.8647)
    assert units.mm_to_cm(12.5) == 1.25
