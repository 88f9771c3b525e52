from __future__ import annotations

import logging

from nbr_beam.models import materials
from nbr_beam.models.design_inputs import AnchorageInput, AnchorageType, BondCondition, SteelRatioOption
from nbr_beam.models.nbr_constants import (
    BAR_FYK,
    BAR_N1,
    HOOK_ALPHA,
    LB_MIN_ABSOLUTE,
    LB_MIN_DIAMETERS,
    LB_MIN_FACTOR,
    N2_GOOD_BOND,
    N2_POOR_BOND,
    N3_DIAMETER_LIMIT,
    NBR6118,
    PLAIN_BAR,
    SafetyFactors,
)
from nbr_beam.models.result_types import (
    AnchorageDesign,
    AnchorageRejected,
    AnchorageResult,
    AnchorageStatus,
    TraceCheck,
)
from nbr_beam.models.units import mm_to_cm
from nbr_beam.models.validation import hook_allowed, input_error_trace, validate_anchorage_inputs

logger = logging.getLogger(__name__)


def _bond_coefficients(inputs: AnchorageInput) -> tuple[float, float, float]:
    """n1 (surface), n2 (bond position), n3 (diameter), NBR 6118 item 9.3.2.1."""
    n1 = BAR_N1[inputs.bar_type.value]
    n2 = N2_GOOD_BOND if inputs.bond_condition == BondCondition.GOOD else N2_POOR_BOND
    n3 = 1.0 if inputs.diameter <= N3_DIAMETER_LIMIT else (132 - inputs.diameter) / 100
    return n1, n2, n3


def calculate_anchorage(inputs: AnchorageInput, factors: SafetyFactors = NBR6118) -> AnchorageResult:
    """
    Necessary anchorage length of a tensioned bar (cm), NBR 6118 item 9.4.2.

    The basic length is doubled for plain CA-25 bars, which also cannot be
    hooked.
    """
    logger.info("Anchorage calc: phi=%.1f mm, fck=%.0f, %s", inputs.diameter, inputs.fck, inputs.bar_type.value)

    errors = validate_anchorage_inputs(inputs)
    if errors:
        logger.warning("Anchorage input rejected: %s", errors)
        return AnchorageRejected(
            status=AnchorageStatus.ERROR_INPUT,
            message=" | ".join(errors),
            trace=(input_error_trace(errors),),
        )

    fyd = materials.fyd(BAR_FYK[inputs.bar_type.value], factors)
    fctd = materials.fctd(inputs.fck, factors)
    n1, n2, n3 = _bond_coefficients(inputs)
    fbd = n1 * n2 * n3 * fctd
    trace: list[TraceCheck] = [
        TraceCheck(
            code_ref="NBR 6118:2014 item 9.3.2.1",
            formula_id="fbd",
            inputs={"n1": n1, "n2": n2, "n3": n3, "fctd_kN_cm2": fctd},
            value=fbd,
            units="kN/cm2",
            status="ok",
        )
    ]

    phi = mm_to_cm(inputs.diameter)
    lb = (phi / 4) * (fyd / fbd)
    plain = inputs.bar_type.value == PLAIN_BAR
    if plain:
        lb *= 2
    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 9.4.2.4",
            formula_id="lb_basic",
            inputs={"phi_cm": phi, "fyd_kN_cm2": fyd, "fbd_kN_cm2": fbd},
            value=lb,
            units="cm",
            status="ok",
            note="doubled for plain bars" if plain else "",
        )
    )

    hooked = inputs.anchorage_type == AnchorageType.HOOK and hook_allowed(inputs.bar_type)
    alpha = HOOK_ALPHA if hooked else 1.0
    if inputs.steel_ratio_option == SteelRatioOption.EQUAL:
        steel_ratio = 1.0
    else:
        steel_ratio = inputs.as_calc / inputs.as_eff

    lb_nec_calc = alpha * lb * steel_ratio
    lb_min = max(LB_MIN_FACTOR * lb, LB_MIN_DIAMETERS * phi, LB_MIN_ABSOLUTE)
    lb_nec = max(lb_nec_calc, lb_min)
    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 9.4.2.5",
            formula_id="lb_nec",
            inputs={"alpha": alpha, "lb_cm": lb, "As_ratio": steel_ratio, "lb_min_cm": lb_min},
            value=lb_nec,
            units="cm",
            status="warning" if lb_nec_calc < lb_min else "ok",
        )
    )
    logger.debug("Anchorage: lb=%.2f lb_min=%.2f lb_nec=%.2f", lb, lb_min, lb_nec)

    return AnchorageDesign(
        status=AnchorageStatus.SUCCESS,
        message="Cálculo do comprimento de ancoragem concluído.",
        trace=tuple(trace),
        lb=lb,
        lb_min=lb_min,
        lb_nec=lb_nec,
        lb_nec_calc=lb_nec_calc,
        fyd=fyd,
        fctd=fctd,
        n1=n1,
        n2=n2,
        n3=n3,
        fbd=fbd,
        alpha=alpha,
        steel_ratio=steel_ratio,
        phi=phi,
    )
