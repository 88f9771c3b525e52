import math

import pytest

from nbr_beam.models.design_inputs import ShearInput
from nbr_beam.models.result_types import ShearStatus
from nbr_beam.models.shear import calculate_shear, effective_depth


@pytest.fixture
def standard_input():
    return ShearInput(bw=20, h=50, fck=25, fyk=500, vk=10, cover=3, stirrup_diameter=5.0, num_legs=2)


class TestShear:
    def test_reference_beam(self, standard_input):
        res = calculate_shear(standard_input)
        assert res.status == ShearStatus.SUCCESS
        assert res.vd == pytest.approx(140.0)
        assert res.d == pytest.approx(45.7)
        assert res.alpha_v2 == pytest.approx(0.9)
        assert res.vrd2 == pytest.approx(396.6, abs=0.1)
        assert res.vc == pytest.approx(70.33, abs=0.02)
        assert res.s_calc == pytest.approx(10.08, abs=0.02)
        assert res.s_adopted == pytest.approx(res.s_calc)

    def test_stirrup_area(self, standard_input):
        res = calculate_shear(standard_input)
        assert res.asw == pytest.approx(2 * math.pi * 0.25 ** 2)

    @pytest.mark.parametrize("vk", [0.5, 1, 5, 10, 15, 20, 25])
    def test_spacing_rules_hold(self, vk):
        res = calculate_shear(ShearInput(vk=vk))
        assert res.vsw == pytest.approx(max(0.0, res.vd - res.vc))
        assert res.s_adopted == min(res.s_calc, res.s_for_min_area, res.s_max)
        expected = ShearStatus.WARNING_MIN_STEEL if res.s_adopted < res.s_calc else ShearStatus.SUCCESS
        assert res.status == expected

    def test_maximum_spacing_governs_with_stirrup_demand(self):
        # 8 mm stirrups: s for the minimum area (~49 cm) is above s_max (~27 cm)
        res = calculate_shear(ShearInput(vk=8, stirrup_diameter=8.0))
        assert res.vsw > 0
        assert math.isfinite(res.s_calc)
        assert res.s_calc > res.s_max
        assert res.s_for_min_area > res.s_max
        assert res.status == ShearStatus.WARNING_MIN_STEEL
        assert res.s_adopted == res.s_max
        assert res.trace[-1].status == "warning"

    def test_calculated_spacing_governs(self):
        res = calculate_shear(ShearInput(vk=15))
        assert res.s_calc < min(res.s_for_min_area, res.s_max)
        assert res.status == ShearStatus.SUCCESS
        assert res.s_adopted == res.s_calc

    def test_no_stirrup_demand_uses_minimum(self):
        res = calculate_shear(ShearInput(vk=1))
        assert res.vsw == 0.0
        assert math.isinf(res.s_calc)
        assert res.status == ShearStatus.WARNING_MIN_STEEL
        assert res.s_adopted == pytest.approx(min(res.s_for_min_area, res.s_max))
        assert res.s_for_min_area == pytest.approx(19.14, abs=0.02)

    def test_strut_crushing(self):
        res = calculate_shear(ShearInput(vk=30))
        assert res.status == ShearStatus.ERROR_VRD2
        assert res.vd > res.vrd2
        assert "s_adopted" not in res.keys()
        assert res.trace[0].status == "error"

    def test_heavy_shear_tightens_maximum_spacing(self):
        res = calculate_shear(ShearInput(vk=20))
        assert res.vd > 0.67 * res.vrd2
        assert res.s_max == pytest.approx(0.3 * res.d)

    def test_normal_shear_maximum_spacing(self, standard_input):
        res = calculate_shear(standard_input)
        assert res.s_max == pytest.approx(min(0.6 * res.d, 30))

    def test_more_legs_increase_spacing(self):
        r2 = calculate_shear(ShearInput(num_legs=2))
        r4 = calculate_shear(ShearInput(num_legs=4))
        assert r4.s_calc == pytest.approx(2 * r2.s_calc)

    @pytest.mark.parametrize("field", ["bw", "h", "fck", "fyk", "vk", "cover", "stirrup_diameter", "num_legs"])
    def test_non_positive_input_rejected(self, field):
        res = calculate_shear(ShearInput(**{field: 0}))
        assert res.status == ShearStatus.ERROR_INPUT
        assert res.status_code == "error"

    def test_effective_depth_uses_stirrup(self):
        assert effective_depth(50, 3, 5.0) == pytest.approx(45.7)
        assert effective_depth(50, 3, 10.0) == pytest.approx(45.2)

    def test_status_code_and_trace_present(self, standard_input):
        res = calculate_shear(standard_input)
        assert res['status_code'] in {'ok', 'warning', 'error'}
        assert isinstance(res['trace'], list)
        assert len(res['trace']) == 3
