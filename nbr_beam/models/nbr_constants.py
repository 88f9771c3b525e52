"""NBR 6118:2014 coefficients and constants (kN / cm units unless noted)."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class SafetyFactors:
    gamma_c: float = 1.4   # Concrete
    gamma_s: float = 1.15  # Steel
    gamma_f: float = 1.4   # Actions


NBR6118 = SafetyFactors()

# Steel
ES = 21000.0                 # kN/cm2 (210 GPa)
EPSILON_CU = 0.0035          # Ultimate concrete strain

# Concrete tensile strength (item 8.2.5), MPa
FCTM_COEFF_LOW = 0.3         # fctm = 0.3 * fck^(2/3), fck <= 50
FCTM_COEFF_HIGH = 2.12       # fctm = 2.12 * ln(1 + 0.11 * fck), fck > 50
FCTK_INF_FACTOR = 0.7
FCK_CLASS_LIMIT = 50.0       # Group I / Group II boundary (MPa)

# Flexure (item 17.2.2), rectangular stress block with alpha_c = 0.85, lambda = 0.8
STRESS_BLOCK_FORCE = 0.68    # 0.85 * 0.8
STRESS_BLOCK_QUAD = 0.272    # 0.68 * 0.4
LEVER_ARM_COEFF = 0.4
X_D_LIMIT_LOW = 0.45         # fck <= 50
X_D_LIMIT_HIGH = 0.35        # fck > 50
RHO_MIN_FCTM_COEFF = 0.4     # rho_min = 0.4 * fctm / fyk
RHO_MIN_ABSOLUTE = 0.0015    # 0.15 % of bw * h
RHO_MAX = 0.04               # 4 % of bw * h

# Nominal detailing used for the effective depth (cm)
NOMINAL_STIRRUP = 1.0
NOMINAL_MAIN_BAR = 1.6

# Shear, Model I (item 17.4.2.2)
VRD2_COEFF = 0.27
ALPHA_V2_DIVISOR = 250.0
VC0_COEFF = 0.6
INNER_LEVER_ARM = 0.9
RHO_SW_MIN_COEFF = 0.2       # rho_sw,min = 0.2 * fctm / fywk
VRD2_SPACING_RATIO = 0.67
S_MAX_NORMAL = 30.0          # min(0.6 d, 30 cm)
S_MAX_NORMAL_FACTOR = 0.6
S_MAX_HEAVY = 20.0           # min(0.3 d, 20 cm)
S_MAX_HEAVY_FACTOR = 0.3

# Anchorage (item 9.4.2)
N2_GOOD_BOND = 1.0
N2_POOR_BOND = 0.7
N3_DIAMETER_LIMIT = 32.0     # mm
HOOK_ALPHA = 0.7
LB_MIN_FACTOR = 0.3
LB_MIN_DIAMETERS = 10.0
LB_MIN_ABSOLUTE = 10.0       # cm

BAR_FYK = MappingProxyType({"CA-25": 250.0, "CA-50": 500.0, "CA-60": 600.0})
BAR_N1 = MappingProxyType({"CA-25": 1.0, "CA-50": 2.25, "CA-60": 2.25})
PLAIN_BAR = "CA-25"

# Minimum flexural reinforcement ratios, rectangular sections (Table 17.3), %
MINIMUM_STEEL_RATES = MappingProxyType({
    20: 0.150, 25: 0.150, 30: 0.150, 35: 0.164, 40: 0.179,
    45: 0.194, 50: 0.208, 55: 0.211, 60: 0.219, 65: 0.226,
    70: 0.233, 75: 0.239, 80: 0.245, 85: 0.251, 90: 0.256,
})
# Non-tabulated fck falls back to the lowest rate of the table.
MINIMUM_STEEL_FALLBACK = min(MINIMUM_STEEL_RATES.values())
FCK_VALUES = tuple(MINIMUM_STEEL_RATES)

# Commercial diameters (mm)
BAR_DIAMETERS = (5.0, 6.3, 8.0, 10.0, 12.5, 16.0, 20.0, 25.0, 32.0, 40.0)
STIRRUP_DIAMETERS = (5.0, 6.3, 8.0, 10.0)

# Default cover by environmental aggressiveness class (Table 7.2), cm
COVER_BY_AGGRESSIVENESS = MappingProxyType({
    "I (Fraca)": 2.5,
    "II (Moderada)": 3.0,
    "III (Forte)": 4.0,
    "IV (Muito Forte)": 5.0,
})
