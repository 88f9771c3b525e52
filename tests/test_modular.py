import unittest

from nbr_beam.models import anchorage, converter, flexure, minimum_steel, shear
from nbr_beam.models.design_inputs import (
    AnchorageInput,
    ConverterInput,
    FlexureInput,
    MinimumSteelInput,
    ShearInput,
)


class TestModularBeam(unittest.TestCase):
    def setUp(self):
        self.flexure_input = FlexureInput(bw=20, h=50, fck=25, fyk=500, mk=8, cover=3)
        self.shear_input = ShearInput(bw=20, h=50, fck=25, fyk=500, vk=10, cover=3)

    def test_flexure(self):
        res = flexure.calculate_flexure(self.flexure_input)
        self.assertEqual(res['status'], 'success')
        self.assertGreater(res['As_calc'], 0)

    def test_shear(self):
        # Vd = 140 kN, about twice Vc
        res = shear.calculate_shear(self.shear_input)
        self.assertTrue(res['vsw'] > 0)
        self.assertLess(res['s_adopted'], res['s_max'])

    def test_anchorage(self):
        res = anchorage.calculate_anchorage(AnchorageInput())
        self.assertEqual(res['status_code'], 'ok')
        self.assertGreaterEqual(res['lb_nec'], res['lb_min'])

    def test_minimum_steel(self):
        res = minimum_steel.calculate_minimum_steel(MinimumSteelInput())
        self.assertGreater(res['md_resisted'], 0)

    def test_converter(self):
        res = converter.convert_spacing(ConverterInput())
        self.assertIsNotNone(res)
        self.assertGreater(res.spacing, 10.0)

    def test_status_bands(self):
        # Case 1: Minimum steel
        res = flexure.calculate_flexure(FlexureInput(mk=1))
        self.assertEqual(res['status_code'], 'warning')

        # Case 2: Ductility exceeded
        res_fail = flexure.calculate_flexure(FlexureInput(mk=20))
        self.assertEqual(res_fail['status_code'], 'error')

        # Case 3: Strut crushing
        res_strut = shear.calculate_shear(ShearInput(vk=30))
        self.assertEqual(res_strut['status'], 'error_vrd2')


if __name__ == '__main__':
    unittest.main()
