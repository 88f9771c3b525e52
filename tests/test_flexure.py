import pytest

from nbr_beam.models.design_inputs import FlexureInput
from nbr_beam.models.flexure import calculate_flexure, effective_depth, x_d_limit
from nbr_beam.models.result_types import FlexureStatus


@pytest.fixture
def standard_input():
    return FlexureInput(bw=20, h=50, fck=25, fyk=500, mk=8, cover=3)


class TestFlexure:
    def test_reference_beam(self, standard_input):
        res = calculate_flexure(standard_input)
        assert res.status == FlexureStatus.SUCCESS
        assert res.d == pytest.approx(45.2)
        assert res.md == pytest.approx(11200.0)
        assert res.x == pytest.approx(11.34, abs=0.01)
        assert res.x_d_ratio < 0.45
        assert res.As == pytest.approx(6.33, abs=0.02)
        assert res.As_min == pytest.approx(1.855, abs=0.005)
        assert res.As_max == pytest.approx(40.0)

    def test_design_strengths_in_kn_cm2(self, standard_input):
        res = calculate_flexure(standard_input)
        assert res.fcd == pytest.approx(25 / 1.4 / 10)
        assert res.fyd == pytest.approx(500 / 1.15 / 10)

    def test_small_moment_adopts_minimum_steel(self, standard_input):
        res = calculate_flexure(FlexureInput(bw=20, h=50, fck=25, fyk=500, mk=1, cover=3))
        assert res.status == FlexureStatus.WARNING_MIN_STEEL
        assert res.As_calc < res.As_min
        assert res.As == pytest.approx(res.As_min)
        assert res.status_code == "warning"

    @pytest.mark.parametrize("mk", [0.5, 1, 3, 5, 8, 10, 12])
    def test_ductile_sections_never_below_minimum(self, mk):
        res = calculate_flexure(FlexureInput(mk=mk))
        assert res.x_d_ratio <= res.x_d_limit
        assert res.As >= res.As_min
        expected = FlexureStatus.WARNING_MIN_STEEL if res.As_calc < res.As_min else FlexureStatus.SUCCESS
        assert res.status == expected

    def test_ductility_limit_exceeded(self):
        res = calculate_flexure(FlexureInput(mk=20))
        assert res.status == FlexureStatus.ERROR_X_D_LIMIT
        assert res.x_d_ratio > 0.45
        assert res.x_d_limit == 0.45
        assert "As" not in res.keys()

    def test_insufficient_section_negative_discriminant(self):
        res = calculate_flexure(FlexureInput(mk=25))
        assert res.status == FlexureStatus.ERROR_X_D_LIMIT
        assert res.x == 0.0
        assert "insuficiente" in res.message
        assert res.trace[-1].formula_id == "neutral_axis_quadratic_discriminant"

    def test_negative_discriminant_not_rescued_by_compression_steel(self):
        res = calculate_flexure(FlexureInput(mk=25), allow_double_reinforcement=True)
        assert res.status == FlexureStatus.ERROR_X_D_LIMIT

    def test_double_reinforcement(self):
        res = calculate_flexure(FlexureInput(mk=20, d_prime=4), allow_double_reinforcement=True)
        assert res.status == FlexureStatus.SUCCESS_COMPRESSION_STEEL
        assert res.doubly_reinforced
        assert res.x == pytest.approx(0.45 * 45.2)
        assert res.x_d_ratio == pytest.approx(0.45)
        assert res.m1d + res.m2d == pytest.approx(res.md)
        assert res.m1d == pytest.approx(18308.6, rel=1e-3)
        # eps_sc * Es is above fyd: compression steel yields
        assert res.sigma_sd == pytest.approx(res.fyd)
        assert res.As_prime == pytest.approx(5.41, abs=0.01)
        assert res.As1 == pytest.approx(11.36, abs=0.01)
        assert res.As2 == pytest.approx(res.As_prime)
        assert res.As_calc == pytest.approx(res.As1 + res.As2)
        assert res.As == pytest.approx(res.As_calc)

    def test_compression_steel_not_yielded(self):
        # d' close to x: small strain at the compression steel level
        res = calculate_flexure(FlexureInput(mk=20, d_prime=15), allow_double_reinforcement=True)
        assert res.status == FlexureStatus.SUCCESS_COMPRESSION_STEEL
        assert res.sigma_sd < res.fyd
        assert res.sigma_sd == pytest.approx(res.epsilon_sc * 21000)
        assert res.As2 == pytest.approx(res.As_prime * res.sigma_sd / res.fyd)

    def test_compression_steel_below_neutral_axis_rejected(self):
        res = calculate_flexure(FlexureInput(mk=20, d_prime=25), allow_double_reinforcement=True)
        assert res.status == FlexureStatus.ERROR_INPUT

    def test_ductile_section_ignores_double_reinforcement_flag(self, standard_input):
        r1 = calculate_flexure(standard_input)
        r2 = calculate_flexure(standard_input, allow_double_reinforcement=True)
        assert r2.status == FlexureStatus.SUCCESS
        assert r1.As == pytest.approx(r2.As)

    def test_maximum_steel_exceeded(self):
        res = calculate_flexure(FlexureInput(fyk=100, mk=12))
        assert res.status == FlexureStatus.ERROR_MAX_STEEL
        assert res.As > res.As_max
        assert res.status_code == "error"

    @pytest.mark.parametrize("field", ["bw", "h", "fck", "fyk", "mk", "cover", "d_prime"])
    def test_non_positive_input_rejected(self, field):
        res = calculate_flexure(FlexureInput(**{field: 0}))
        assert res.status == FlexureStatus.ERROR_INPUT
        assert field in res.message
        assert set(res.keys()) == {"status", "message", "status_code", "trace"}

    def test_negative_effective_depth_rejected(self):
        res = calculate_flexure(FlexureInput(h=4, cover=3))
        assert res.status == FlexureStatus.ERROR_INPUT
        assert "Altura útil" in res.message

    def test_high_strength_concrete_uses_stricter_limit(self):
        res = calculate_flexure(FlexureInput(fck=60, mk=8))
        assert res.x_d_limit == 0.35
        assert res.status in {FlexureStatus.SUCCESS, FlexureStatus.WARNING_MIN_STEEL}

    def test_higher_fyk_gives_less_steel(self):
        r1 = calculate_flexure(FlexureInput(fyk=250))
        r2 = calculate_flexure(FlexureInput(fyk=500))
        assert r1.As_calc > r2.As_calc

    def test_effective_depth_and_limits(self):
        assert effective_depth(50, 3) == pytest.approx(45.2)
        assert x_d_limit(50) == 0.45
        assert x_d_limit(50.1) == 0.35

    def test_trace_records_checks(self, standard_input):
        res = calculate_flexure(standard_input)
        formula_ids = [t.formula_id for t in res.trace]
        assert formula_ids == ["design_strengths", "x_d_ductility", "As_min", "As_max"]
        assert all(t.status == "ok" for t in res.trace)
