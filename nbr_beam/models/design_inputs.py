from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class BarType(str, Enum):
    """Steel categories; CA-25 bars are plain, CA-50/CA-60 are ribbed."""
    CA25 = "CA-25"
    CA50 = "CA-50"
    CA60 = "CA-60"


class BondCondition(str, Enum):
    GOOD = "good"
    POOR = "poor"


class AnchorageType(str, Enum):
    STRAIGHT = "straight"
    HOOK = "hook"


class SteelRatioOption(str, Enum):
    EQUAL = "equal"
    CUSTOM = "custom"


class AggressivenessClass(str, Enum):
    """Environmental aggressiveness classes (NBR 6118 Table 6.1)."""
    CAA1 = "I (Fraca)"
    CAA2 = "II (Moderada)"
    CAA3 = "III (Forte)"
    CAA4 = "IV (Muito Forte)"


class ConverterMode(str, Enum):
    LONGITUDINAL = "longitudinal"
    STIRRUP = "stirrup"


class _InputRecord:
    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        return {k: (v.value if isinstance(v, Enum) else v) for k, v in data.items()}


@dataclass(frozen=True)
class FlexureInput(_InputRecord):
    """
    Args:
        bw: Web width (cm)
        h: Total height (cm)
        fck: Concrete characteristic strength (MPa)
        fyk: Steel characteristic yield strength (MPa)
        mk: Characteristic bending moment (tf.m)
        cover: Cover to the stirrup face (cm)
        d_prime: Distance from the compressed face to the compression steel centroid (cm)
    """
    bw: float = 20.0
    h: float = 50.0
    fck: float = 25.0
    fyk: float = 500.0
    mk: float = 8.0
    cover: float = 3.0
    d_prime: float = 4.0


@dataclass(frozen=True)
class ShearInput(_InputRecord):
    """Lengths in cm, strengths in MPa, vk in tf, stirrup diameter in mm."""
    bw: float = 20.0
    h: float = 50.0
    fck: float = 25.0
    fyk: float = 500.0
    vk: float = 10.0
    cover: float = 3.0
    stirrup_diameter: float = 5.0
    num_legs: int = 2


@dataclass(frozen=True)
class AnchorageInput(_InputRecord):
    """Bar diameter in mm, fck in MPa, steel areas in cm^2."""
    diameter: float = 10.0
    fck: float = 30.0
    bar_type: BarType = BarType.CA50
    steel_ratio_option: SteelRatioOption = SteelRatioOption.EQUAL
    as_calc: float = 0.0
    as_eff: float = 0.0
    anchorage_type: AnchorageType = AnchorageType.STRAIGHT
    bond_condition: BondCondition = BondCondition.GOOD


@dataclass(frozen=True)
class MinimumSteelInput(_InputRecord):
    bw: float = 20.0
    h: float = 50.0
    fck: float = 25.0
    fyk: float = 500.0
    d_h_ratio: float = 0.9


@dataclass(frozen=True)
class ConverterInput(_InputRecord):
    """Diameters in mm, spacings in cm. Leg counts only apply to stirrups."""
    mode: ConverterMode = ConverterMode.LONGITUDINAL
    original_diameter: float = 8.0
    original_spacing: float = 10.0
    equivalent_diameter: float = 10.0
    original_num_legs: int = 2
    equivalent_num_legs: int = 2
    truncate: bool = False
