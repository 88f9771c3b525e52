"""Unit conversion helpers. Internal calculations use kN and cm."""

TF_TO_KN = 10.0


def MPa_to_kN_cm2(val_MPa: float) -> float:
    """Convert MPa to kN/cm^2."""
    return val_MPa / 10


def kN_cm2_to_MPa(val_kN_cm2: float) -> float:
    """Convert kN/cm^2 to MPa."""
    return val_kN_cm2 * 10


def tf_to_kN(val_tf: float) -> float:
    """Convert tf to kN (1 tf taken as 10 kN)."""
    return val_tf * TF_TO_KN


def tfm_to_kNcm(val_tfm: float) -> float:
    """Convert tf-m to kN-cm."""
    return val_tfm * TF_TO_KN * 100


def kNcm_to_kNm(val_kNcm: float) -> float:
    """Convert kN-cm to kN-m."""
    return val_kNcm / 100


def kNcm_to_tfm(val_kNcm: float) -> float:
    """Convert kN-cm to tf-m."""
    return val_kNcm / 1000


def mm_to_cm(val_mm: float) -> float:
    """Convert mm to cm."""
    return val_mm / 10
