from __future__ import annotations

import math

from nbr_beam.models.nbr_constants import (
    FCK_CLASS_LIMIT,
    FCTK_INF_FACTOR,
    FCTM_COEFF_HIGH,
    FCTM_COEFF_LOW,
    NBR6118,
    SafetyFactors,
)
from nbr_beam.models.units import MPa_to_kN_cm2, mm_to_cm


def fctm(fck: float) -> float:
    """Mean tensile strength of concrete (MPa), NBR 6118 item 8.2.5."""
    if fck <= FCK_CLASS_LIMIT:
        return FCTM_COEFF_LOW * fck ** (2 / 3)
    return FCTM_COEFF_HIGH * math.log(1 + 0.11 * fck)


def fctd(fck: float, factors: SafetyFactors = NBR6118) -> float:
    """Design tensile strength from the lower characteristic value (kN/cm^2)."""
    return MPa_to_kN_cm2(FCTK_INF_FACTOR * fctm(fck) / factors.gamma_c)


def fcd(fck: float, factors: SafetyFactors = NBR6118) -> float:
    return MPa_to_kN_cm2(fck / factors.gamma_c)


def fyd(fyk: float, factors: SafetyFactors = NBR6118) -> float:
    return MPa_to_kN_cm2(fyk / factors.gamma_s)


def bar_area(diameter_mm: float) -> float:
    """Cross-sectional area of one bar (cm^2) from its diameter in mm."""
    return math.pi * (mm_to_cm(diameter_mm) / 2) ** 2
