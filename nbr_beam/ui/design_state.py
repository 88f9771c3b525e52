from __future__ import annotations

from typing import Any

from nbr_beam.models import flexure
from nbr_beam.models.design_inputs import (
    AggressivenessClass,
    AnchorageInput,
    AnchorageType,
    BarType,
    BondCondition,
    ConverterInput,
    ConverterMode,
    FlexureInput,
    MinimumSteelInput,
    ShearInput,
    SteelRatioOption,
)
from nbr_beam.models.nbr_constants import COVER_BY_AGGRESSIVENESS
from nbr_beam.models.result_types import FlexureResult, FlexureStatus

INPUT_RECORDS = {
    "flexure": FlexureInput,
    "shear": ShearInput,
    "anchorage": AnchorageInput,
    "minimum_steel": MinimumSteelInput,
    "converter": ConverterInput,
}

_ENUM_FIELDS = {
    "bar_type": BarType,
    "bond_condition": BondCondition,
    "anchorage_type": AnchorageType,
    "steel_ratio_option": SteelRatioOption,
    "mode": ConverterMode,
}


# Widget keys bound to input fields, per calculator
WIDGET_KEYS = {
    "flexure": {
        "bw": "flex_bw",
        "h": "flex_h",
        "fck": "flex_fck",
        "fyk": "flex_fyk",
        "mk": "flex_mk",
        "cover": "flex_cover",
        "d_prime": "flex_d_prime",
    },
}
FLEXURE_AGGRESSIVENESS_KEY = "flex_aggressiveness"
DEFAULT_AGGRESSIVENESS = AggressivenessClass.CAA2


def init_design_state(session_state: dict[str, Any]) -> None:
    if "design_inputs" not in session_state:
        session_state["design_inputs"] = {name: record().to_dict() for name, record in INPUT_RECORDS.items()}
    if "force_double_reinforcement" not in session_state:
        session_state["force_double_reinforcement"] = False


def seed_widget_state(session_state: dict[str, Any], calculator: str) -> None:
    """Give every keyed widget of a calculator its stored value before it is drawn."""
    init_design_state(session_state)
    stored = session_state["design_inputs"][calculator]
    for field_name, key in WIDGET_KEYS.get(calculator, {}).items():
        if key not in session_state:
            session_state[key] = stored[field_name]
    if calculator == "flexure" and FLEXURE_AGGRESSIVENESS_KEY not in session_state:
        session_state[FLEXURE_AGGRESSIVENESS_KEY] = DEFAULT_AGGRESSIVENESS.value


def update_design_inputs(session_state: dict[str, Any], calculator: str, **kwargs: Any) -> None:
    init_design_state(session_state)
    session_state["design_inputs"][calculator].update(kwargs)


def reset_design_inputs(session_state: dict[str, Any], calculator: str) -> None:
    """Restore defaults for the stored inputs and for the widgets bound to them."""
    init_design_state(session_state)
    defaults = INPUT_RECORDS[calculator]().to_dict()
    session_state["design_inputs"][calculator] = defaults
    for field_name, key in WIDGET_KEYS.get(calculator, {}).items():
        session_state[key] = defaults[field_name]
    if calculator == "flexure":
        session_state[FLEXURE_AGGRESSIVENESS_KEY] = DEFAULT_AGGRESSIVENESS.value
        session_state["force_double_reinforcement"] = False


def get_design_snapshot(session_state: dict[str, Any], calculator: str) -> Any:
    """Rebuild the immutable input record of a calculator from session state."""
    init_design_state(session_state)
    data = dict(session_state["design_inputs"][calculator])
    for name, enum_cls in _ENUM_FIELDS.items():
        if name in data:
            data[name] = enum_cls(data[name])
    return INPUT_RECORDS[calculator](**data)


def default_cover_for(aggressiveness: AggressivenessClass) -> float:
    """Default cover (cm) for an environmental aggressiveness class."""
    return COVER_BY_AGGRESSIVENESS[aggressiveness.value]


def design_flexure(inputs: FlexureInput, force_double_reinforcement: bool) -> FlexureResult:
    """
    Run the flexure calculator, retrying with compression steel only when the
    user asked for it and the ductility limit was exceeded.
    """
    res = flexure.calculate_flexure(inputs)
    if force_double_reinforcement and res.status == FlexureStatus.ERROR_X_D_LIMIT:
        res = flexure.calculate_flexure(inputs, allow_double_reinforcement=True)
    return res
