from __future__ import annotations

import logging
import math

from nbr_beam.models import materials
from nbr_beam.models.design_inputs import ShearInput
from nbr_beam.models.nbr_constants import (
    ALPHA_V2_DIVISOR,
    INNER_LEVER_ARM,
    NBR6118,
    NOMINAL_MAIN_BAR,
    RHO_SW_MIN_COEFF,
    S_MAX_HEAVY,
    S_MAX_HEAVY_FACTOR,
    S_MAX_NORMAL,
    S_MAX_NORMAL_FACTOR,
    VC0_COEFF,
    VRD2_COEFF,
    VRD2_SPACING_RATIO,
    SafetyFactors,
)
from nbr_beam.models.result_types import (
    ShearDesign,
    ShearRejected,
    ShearResult,
    ShearStatus,
    ShearStrutFailure,
    TraceCheck,
)
from nbr_beam.models.units import mm_to_cm, tf_to_kN
from nbr_beam.models.validation import input_error_trace, validate_positive

logger = logging.getLogger(__name__)


def effective_depth(h: float, cover: float, stirrup_diameter_mm: float) -> float:
    """Effective depth with the actual stirrup and a nominal 16 mm main bar (cm)."""
    return h - cover - mm_to_cm(stirrup_diameter_mm) - NOMINAL_MAIN_BAR / 2


def _compute_spacing(asw: float, d: float, fywd: float, vsw: float, vd: float, vrd2: float,
                     fctm: float, fyk: float, bw: float) -> dict:
    """Calculated, minimum-area and maximum stirrup spacings (cm)."""
    s_calc = asw * INNER_LEVER_ARM * d * fywd / vsw if vsw > 0 else math.inf

    # Asw,min / s = rho_sw,min * bw (item 17.4.1.1.1)
    asw_s_min = RHO_SW_MIN_COEFF * fctm / fyk * bw
    s_for_min_area = asw / asw_s_min

    # Item 18.3.3.2
    if vd <= VRD2_SPACING_RATIO * vrd2:
        s_max = min(S_MAX_NORMAL_FACTOR * d, S_MAX_NORMAL)
    else:
        s_max = min(S_MAX_HEAVY_FACTOR * d, S_MAX_HEAVY)

    return {
        "s_calc": s_calc,
        "asw_s_min": asw_s_min,
        "s_for_min_area": s_for_min_area,
        "s_max": s_max,
        "s_adopted": min(s_calc, s_for_min_area, s_max),
    }


def calculate_shear(inputs: ShearInput, factors: SafetyFactors = NBR6118) -> ShearResult:
    """
    Design vertical stirrups per NBR 6118 Model I (theta = 45 degrees).

    Forces in kN, lengths in cm, stresses in kN/cm2. When Vsw is zero the
    calculated spacing is infinite and never governs.
    """
    logger.info("Shear calc: vk=%.2f tf, bw=%.1f h=%.1f", inputs.vk, inputs.bw, inputs.h)

    errors = validate_positive({
        "bw": inputs.bw, "h": inputs.h, "fck": inputs.fck, "fyk": inputs.fyk, "vk": inputs.vk,
        "cover": inputs.cover, "stirrup_diameter": inputs.stirrup_diameter, "num_legs": inputs.num_legs,
    })
    d = effective_depth(inputs.h, inputs.cover, inputs.stirrup_diameter)
    if not errors and d <= 0:
        errors.append("Altura útil (d) inválida. Verifique a altura e o cobrimento.")
    if errors:
        logger.warning("Shear input rejected: %s", errors)
        return ShearRejected(
            status=ShearStatus.ERROR_INPUT,
            message=" | ".join(errors),
            trace=(input_error_trace(errors),),
        )

    vd = tf_to_kN(inputs.vk) * factors.gamma_f
    fcd = materials.fcd(inputs.fck, factors)
    fctm = materials.fctm(inputs.fck)
    fctd = materials.fctd(inputs.fck, factors)
    fywd = materials.fyd(inputs.fyk, factors)

    alpha_v2 = 1 - inputs.fck / ALPHA_V2_DIVISOR
    vrd2 = VRD2_COEFF * alpha_v2 * fcd * inputs.bw * d
    trace: list[TraceCheck] = [
        TraceCheck(
            code_ref="NBR 6118:2014 item 17.4.2.2",
            formula_id="VRd2",
            inputs={"fck_MPa": inputs.fck, "bw_cm": inputs.bw, "d_cm": d, "alpha_v2": alpha_v2},
            value=vrd2,
            units="kN",
            status="ok" if vd <= vrd2 else "error",
        )
    ]

    if vd > vrd2:
        logger.warning("Compression strut crushing: Vd=%.1f > VRd2=%.1f", vd, vrd2)
        return ShearStrutFailure(
            status=ShearStatus.ERROR_VRD2,
            message=(
                f"Esforço cortante (Vd = {vd:.2f} kN) excede a resistência da biela de compressão "
                f"(VRd2 = {vrd2:.2f} kN). A seção de concreto é insuficiente."
            ),
            trace=tuple(trace),
            d=d, vd=vd, fcd=fcd, alpha_v2=alpha_v2, vrd2=vrd2,
        )

    vc = VC0_COEFF * fctd * inputs.bw * d
    vsw = max(0.0, vd - vc)
    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 17.4.2.2",
            formula_id="Vc0_model_I",
            inputs={"fctd_kN_cm2": fctd, "bw_cm": inputs.bw, "d_cm": d},
            value=vc,
            units="kN",
            status="ok",
        )
    )

    asw = inputs.num_legs * materials.bar_area(inputs.stirrup_diameter)
    spacing = _compute_spacing(asw, d, fywd, vsw, vd, vrd2, fctm, inputs.fyk, inputs.bw)
    s_calc = spacing["s_calc"]

    if s_calc > spacing["s_for_min_area"] or s_calc > spacing["s_max"]:
        status = ShearStatus.WARNING_MIN_STEEL
        message = (
            "Cálculo OK. O espaçamento foi definido pela armadura mínima ou pelo espaçamento "
            "máximo permitido."
        )
    else:
        status = ShearStatus.SUCCESS
        message = "Dimensionamento dos estribos concluído com sucesso."

    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 18.3.3.2",
            formula_id="stirrup_spacing",
            inputs={"Asw_cm2": asw, "Vsw_kN": vsw, "s_calc_cm": s_calc,
                    "s_min_area_cm": spacing["s_for_min_area"], "s_max_cm": spacing["s_max"]},
            value=spacing["s_adopted"],
            units="cm",
            status="warning" if status == ShearStatus.WARNING_MIN_STEEL else "ok",
        )
    )
    logger.debug("Shear spacing: %s", spacing)

    return ShearDesign(
        status=status,
        message=message,
        trace=tuple(trace),
        s_calc=s_calc,
        s_for_min_area=spacing["s_for_min_area"],
        s_max=spacing["s_max"],
        s_adopted=spacing["s_adopted"],
        vrd2=vrd2,
        vc=vc,
        vsw=vsw,
        vd=vd,
        asw_s_min=spacing["asw_s_min"],
        d=d,
        fcd=fcd,
        fctd=fctd,
        fywd=fywd,
        alpha_v2=alpha_v2,
        asw=asw,
    )
