from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Iterator, Union


class FlexureStatus(str, Enum):
    SUCCESS = "success"
    SUCCESS_COMPRESSION_STEEL = "success_compression_steel"
    WARNING_MIN_STEEL = "warning_min_steel"
    ERROR_X_D_LIMIT = "error_x_d_limit"
    ERROR_MAX_STEEL = "error_max_steel"
    ERROR_INPUT = "error_input"


class ShearStatus(str, Enum):
    SUCCESS = "success"
    WARNING_MIN_STEEL = "warning_min_steel"
    ERROR_VRD2 = "error_vrd2"
    ERROR_INPUT = "error_input"


class AnchorageStatus(str, Enum):
    SUCCESS = "success"
    ERROR_INPUT = "error_input"


class MinimumSteelStatus(str, Enum):
    SUCCESS = "success"
    ERROR_INPUT = "error_input"


def status_code_for(status: Enum) -> str:
    """Collapse an engine status into the coarse ok / warning / error code."""
    if status.value.startswith("success"):
        return "ok"
    if status.value.startswith("warning"):
        return "warning"
    return "error"


@dataclass(frozen=True)
class TraceCheck:
    code_ref: str
    formula_id: str
    inputs: dict[str, float]
    value: float
    units: str
    status: str
    note: str = ""


@dataclass(frozen=True)
class ResultBase:
    """
    Common shape of every engine result.

    Each subclass is one variant of an engine's tagged union and declares the
    statuses it may carry in ``ALLOWED_STATUSES``.
    """

    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset()

    status: Enum
    message: str
    trace: tuple[TraceCheck, ...] = ()

    def __post_init__(self) -> None:
        if self.status not in self.ALLOWED_STATUSES:
            raise ValueError(f"{type(self).__name__} cannot carry status {self.status!r}")

    @property
    def status_code(self) -> str:
        return status_code_for(self.status)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in fields(self):
            if f.name == "trace":
                continue
            data[f.name] = getattr(self, f.name)
        data["status"] = self.status.value
        data["status_code"] = self.status_code
        data["trace"] = [asdict(t) for t in self.trace]
        return data

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def keys(self):
        return self.to_dict().keys()

    def items(self):
        return self.to_dict().items()

    def values(self):
        return self.to_dict().values()

    def __iter__(self) -> Iterator[str]:
        return iter(self.to_dict())

    def __len__(self) -> int:
        return len(self.to_dict())


# --- Flexure -----------------------------------------------------------------

@dataclass(frozen=True)
class FlexureRejected(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({FlexureStatus.ERROR_INPUT})


@dataclass(frozen=True)
class FlexureDuctilityFailure(ResultBase):
    """Insufficient section or x/d above the limit without compression steel."""

    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({FlexureStatus.ERROR_X_D_LIMIT})

    x: float = 0.0
    d: float = 0.0
    x_d_ratio: float = 0.0
    x_d_limit: float = 0.0
    fcd: float = 0.0
    fyd: float = 0.0
    md: float = 0.0


@dataclass(frozen=True)
class FlexureDesign(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({
        FlexureStatus.SUCCESS,
        FlexureStatus.WARNING_MIN_STEEL,
        FlexureStatus.ERROR_MAX_STEEL,
    })

    As: float = 0.0
    As_calc: float = 0.0
    As_min: float = 0.0
    As_max: float = 0.0
    rho_min: float = 0.0
    x: float = 0.0
    d: float = 0.0
    x_d_ratio: float = 0.0
    x_d_limit: float = 0.0
    fcd: float = 0.0
    fyd: float = 0.0
    md: float = 0.0

    @property
    def doubly_reinforced(self) -> bool:
        return False


@dataclass(frozen=True)
class FlexureDoublyReinforced(FlexureDesign):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({
        FlexureStatus.SUCCESS_COMPRESSION_STEEL,
        FlexureStatus.WARNING_MIN_STEEL,
        FlexureStatus.ERROR_MAX_STEEL,
    })

    As_prime: float = 0.0
    m1d: float = 0.0
    m2d: float = 0.0
    epsilon_sc: float = 0.0
    sigma_sd: float = 0.0
    As1: float = 0.0
    As2: float = 0.0

    @property
    def doubly_reinforced(self) -> bool:
        return True


FlexureResult = Union[FlexureRejected, FlexureDuctilityFailure, FlexureDesign, FlexureDoublyReinforced]


# --- Shear -------------------------------------------------------------------

@dataclass(frozen=True)
class ShearRejected(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({ShearStatus.ERROR_INPUT})


@dataclass(frozen=True)
class ShearStrutFailure(ResultBase):
    """Vd above VRd2; no stirrup design is attempted."""

    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({ShearStatus.ERROR_VRD2})

    d: float = 0.0
    vd: float = 0.0
    fcd: float = 0.0
    alpha_v2: float = 0.0
    vrd2: float = 0.0


@dataclass(frozen=True)
class ShearDesign(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({ShearStatus.SUCCESS, ShearStatus.WARNING_MIN_STEEL})

    s_calc: float = 0.0
    s_for_min_area: float = 0.0
    s_max: float = 0.0
    s_adopted: float = 0.0
    vrd2: float = 0.0
    vc: float = 0.0
    vsw: float = 0.0
    vd: float = 0.0
    asw_s_min: float = 0.0
    d: float = 0.0
    fcd: float = 0.0
    fctd: float = 0.0
    fywd: float = 0.0
    alpha_v2: float = 0.0
    asw: float = 0.0


ShearResult = Union[ShearRejected, ShearStrutFailure, ShearDesign]


# --- Anchorage ---------------------------------------------------------------

@dataclass(frozen=True)
class AnchorageRejected(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({AnchorageStatus.ERROR_INPUT})


@dataclass(frozen=True)
class AnchorageDesign(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({AnchorageStatus.SUCCESS})

    lb: float = 0.0
    lb_min: float = 0.0
    lb_nec: float = 0.0
    lb_nec_calc: float = 0.0
    fyd: float = 0.0
    fctd: float = 0.0
    n1: float = 0.0
    n2: float = 0.0
    n3: float = 0.0
    fbd: float = 0.0
    alpha: float = 0.0
    steel_ratio: float = 0.0
    phi: float = 0.0


AnchorageResult = Union[AnchorageRejected, AnchorageDesign]


# --- Minimum steel -----------------------------------------------------------

@dataclass(frozen=True)
class MinimumSteelRejected(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({MinimumSteelStatus.ERROR_INPUT})


@dataclass(frozen=True)
class MinimumSteelDesign(ResultBase):
    ALLOWED_STATUSES: ClassVar[frozenset] = frozenset({MinimumSteelStatus.SUCCESS})

    rho_min_percent: float = 0.0
    as_min_by_rate: float = 0.0
    w: float = 0.0
    md_resisted: float = 0.0
    md_resisted_kn_cm: float = 0.0
    x: float = 0.0
    d: float = 0.0
    fcd: float = 0.0
    fyd: float = 0.0


MinimumSteelResult = Union[MinimumSteelRejected, MinimumSteelDesign]


# --- Converter ---------------------------------------------------------------

@dataclass(frozen=True)
class ConverterResult:
    spacing: float
    as_per_meter: float

    def to_dict(self) -> dict[str, Any]:
        return {"spacing": self.spacing, "as_per_meter": self.as_per_meter}
