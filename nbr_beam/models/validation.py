from __future__ import annotations

from typing import Mapping

from nbr_beam.models.design_inputs import AnchorageInput, AnchorageType, BarType, SteelRatioOption
from nbr_beam.models.result_types import TraceCheck

POSITIVE_VALUES_MESSAGE = "Todos os valores de entrada devem ser positivos e maiores que zero."


def validate_positive(values: Mapping[str, float]) -> list[str]:
    """Return one error per non-positive value. Empty list means valid."""
    errors: list[str] = []
    non_positive = [name for name, value in values.items() if not value or value <= 0]
    if non_positive:
        errors.append(f"{POSITIVE_VALUES_MESSAGE} ({', '.join(non_positive)})")
    return errors


def validate_anchorage_inputs(inputs: AnchorageInput) -> list[str]:
    errors = validate_positive({"diameter": inputs.diameter, "fck": inputs.fck})
    if inputs.steel_ratio_option == SteelRatioOption.CUSTOM:
        area_errors = validate_positive({"as_calc": inputs.as_calc, "as_eff": inputs.as_eff})
        errors.extend(area_errors)
        if not area_errors and inputs.as_calc > inputs.as_eff:
            errors.append(
                "A área de aço efetiva (As,ef) deve ser maior ou igual à área de aço calculada (As,calc)."
            )
    if inputs.anchorage_type == AnchorageType.HOOK and not hook_allowed(inputs.bar_type):
        errors.append("Barras lisas (CA-25) não podem ser ancoradas com gancho.")
    return errors


def hook_allowed(bar_type: BarType) -> bool:
    """Hooks are only allowed for ribbed bars."""
    return bar_type != BarType.CA25


def input_error_trace(errors: list[str]) -> TraceCheck:
    return TraceCheck(
        code_ref="Input Policy",
        formula_id="INPUT_VALIDATION",
        inputs={},
        value=float(len(errors)),
        units="errors",
        status="error",
        note=" | ".join(errors),
    )
