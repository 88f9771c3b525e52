import pytest

from nbr_beam.models.design_inputs import MinimumSteelInput
from nbr_beam.models.minimum_steel import calculate_minimum_steel, minimum_rate
from nbr_beam.models.result_types import MinimumSteelStatus


class TestMinimumSteel:
    def test_reference_section(self):
        res = calculate_minimum_steel(MinimumSteelInput(bw=20, h=50, fck=25, fyk=500, d_h_ratio=0.9))
        assert res.status == MinimumSteelStatus.SUCCESS
        assert res.rho_min_percent == pytest.approx(0.150)
        assert res.as_min_by_rate == pytest.approx(1.5)
        assert res.d == pytest.approx(45.0)
        assert res.x == pytest.approx(2.685, abs=0.001)
        assert res.md_resisted_kn_cm == pytest.approx(2864.7, abs=0.5)
        assert res.md_resisted == pytest.approx(res.md_resisted_kn_cm / 1000)
        assert res.w == pytest.approx(20 * 50 ** 2 / 6)

    def test_force_equilibrium(self):
        res = calculate_minimum_steel(MinimumSteelInput())
        assert 0.68 * 20 * res.x * res.fcd == pytest.approx(res.as_min_by_rate * res.fyd)

    @pytest.mark.parametrize("fck, rate", [(20, 0.150), (30, 0.150), (35, 0.164), (40, 0.179),
                                           (50, 0.208), (70, 0.233), (90, 0.256)])
    def test_table_rates(self, fck, rate):
        assert minimum_rate(fck) == rate

    def test_non_tabulated_fck_falls_back_to_lowest_rate(self):
        res = calculate_minimum_steel(MinimumSteelInput(fck=27))
        assert res.rho_min_percent == pytest.approx(0.150)
        assert "not tabulated" in res.trace[0].note

    def test_float_fck_matches_table(self):
        assert minimum_rate(40.0) == 0.179

    @pytest.mark.parametrize("field", ["bw", "h", "fck", "fyk", "d_h_ratio"])
    def test_non_positive_input_rejected(self, field):
        res = calculate_minimum_steel(MinimumSteelInput(**{field: 0}))
        assert res.status == MinimumSteelStatus.ERROR_INPUT
        assert "md_resisted" not in res.keys()
