from __future__ import annotations

import logging

from nbr_beam.models import materials
from nbr_beam.models.design_inputs import MinimumSteelInput
from nbr_beam.models.nbr_constants import (
    LEVER_ARM_COEFF,
    MINIMUM_STEEL_FALLBACK,
    MINIMUM_STEEL_RATES,
    NBR6118,
    STRESS_BLOCK_FORCE,
    SafetyFactors,
)
from nbr_beam.models.result_types import (
    MinimumSteelDesign,
    MinimumSteelRejected,
    MinimumSteelResult,
    MinimumSteelStatus,
    TraceCheck,
)
from nbr_beam.models.units import kNcm_to_tfm
from nbr_beam.models.validation import input_error_trace, validate_positive

logger = logging.getLogger(__name__)


def minimum_rate(fck: float) -> float:
    """Table 17.3 rate (%) for fck; values off the table use its lowest rate."""
    return MINIMUM_STEEL_RATES.get(fck, MINIMUM_STEEL_FALLBACK)


def _rejected(errors: list[str]) -> MinimumSteelRejected:
    logger.warning("Minimum steel input rejected: %s", errors)
    return MinimumSteelRejected(
        status=MinimumSteelStatus.ERROR_INPUT,
        message=" | ".join(errors),
        trace=(input_error_trace(errors),),
    )


def calculate_minimum_steel(inputs: MinimumSteelInput, factors: SafetyFactors = NBR6118) -> MinimumSteelResult:
    """Minimum flexural steel by Table 17.3 and the design moment it resists."""
    logger.info("Minimum steel calc: bw=%.1f h=%.1f fck=%.0f", inputs.bw, inputs.h, inputs.fck)

    errors = validate_positive({
        "bw": inputs.bw, "h": inputs.h, "fck": inputs.fck, "fyk": inputs.fyk, "d_h_ratio": inputs.d_h_ratio,
    })
    if errors:
        return _rejected(errors)

    rho_min_percent = minimum_rate(inputs.fck)
    as_min = rho_min_percent / 100 * inputs.bw * inputs.h
    trace: list[TraceCheck] = [
        TraceCheck(
            code_ref="NBR 6118:2014 Table 17.3",
            formula_id="rho_min",
            inputs={"fck_MPa": inputs.fck, "bw_cm": inputs.bw, "h_cm": inputs.h},
            value=as_min,
            units="cm2",
            status="ok",
            note="" if inputs.fck in MINIMUM_STEEL_RATES else "fck not tabulated, lowest rate adopted",
        )
    ]

    w = inputs.bw * inputs.h ** 2 / 6
    d = inputs.d_h_ratio * inputs.h
    if d <= 0:
        return _rejected(["Altura útil (d) inválida. Verifique a altura e a relação d/h."])

    fcd = materials.fcd(inputs.fck, factors)
    fyd = materials.fyd(inputs.fyk, factors)

    # 0.68 * bw * x * fcd = As * fyd
    denominator = STRESS_BLOCK_FORCE * inputs.bw * fcd
    if denominator == 0:
        return _rejected(["Erro no cálculo. Verifique os dados de entrada."])
    x = as_min * fyd / denominator

    md_kn_cm = as_min * fyd * (d - LEVER_ARM_COEFF * x)
    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 17.2.2",
            formula_id="Md_resisted",
            inputs={"As_cm2": as_min, "fyd_kN_cm2": fyd, "d_cm": d, "x_cm": x},
            value=md_kn_cm,
            units="kN.cm",
            status="ok",
        )
    )

    return MinimumSteelDesign(
        status=MinimumSteelStatus.SUCCESS,
        message="Cálculo da armadura mínima concluído.",
        trace=tuple(trace),
        rho_min_percent=rho_min_percent,
        as_min_by_rate=as_min,
        w=w,
        md_resisted=kNcm_to_tfm(md_kn_cm),
        md_resisted_kn_cm=md_kn_cm,
        x=x,
        d=d,
        fcd=fcd,
        fyd=fyd,
    )
