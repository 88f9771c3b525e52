from __future__ import annotations

import logging
import math

from nbr_beam.models import materials
from nbr_beam.models.design_inputs import FlexureInput
from nbr_beam.models.nbr_constants import (
    EPSILON_CU,
    ES,
    FCK_CLASS_LIMIT,
    LEVER_ARM_COEFF,
    NBR6118,
    NOMINAL_MAIN_BAR,
    NOMINAL_STIRRUP,
    RHO_MAX,
    RHO_MIN_ABSOLUTE,
    RHO_MIN_FCTM_COEFF,
    STRESS_BLOCK_FORCE,
    STRESS_BLOCK_QUAD,
    X_D_LIMIT_HIGH,
    X_D_LIMIT_LOW,
    SafetyFactors,
)
from nbr_beam.models.result_types import (
    FlexureDesign,
    FlexureDoublyReinforced,
    FlexureDuctilityFailure,
    FlexureRejected,
    FlexureResult,
    FlexureStatus,
    TraceCheck,
)
from nbr_beam.models.units import tfm_to_kNcm
from nbr_beam.models.validation import input_error_trace, validate_positive

logger = logging.getLogger(__name__)


def effective_depth(h: float, cover: float) -> float:
    """Effective depth assuming a 10 mm stirrup and a 16 mm main bar (cm)."""
    return h - cover - NOMINAL_STIRRUP - NOMINAL_MAIN_BAR / 2


def x_d_limit(fck: float) -> float:
    """Ductility limit for x/d, NBR 6118 item 14.6.4.3."""
    return X_D_LIMIT_LOW if fck <= FCK_CLASS_LIMIT else X_D_LIMIT_HIGH


def _solve_neutral_axis(bw: float, fcd: float, d: float, md: float) -> float | None:
    """
    Smaller root of 0.272*bw*fcd*x^2 - 0.68*bw*fcd*d*x + Md = 0.

    The coefficients hold for fck <= 50 MPa and are reused above it.
    Returns None when the section cannot resist Md at all.
    """
    a = STRESS_BLOCK_QUAD * bw * fcd
    b = -STRESS_BLOCK_FORCE * bw * fcd * d
    delta = b ** 2 - 4 * a * md
    if delta < 0:
        return None
    return (-b - math.sqrt(delta)) / (2 * a)


def _compute_As_min(fck: float, fyk: float, bw: float, d: float, h: float) -> tuple[float, float]:
    """Minimum tension steel per NBR 6118 item 17.3.5.2.1. Returns (As_min, rho_min)."""
    rho_min = RHO_MIN_FCTM_COEFF * materials.fctm(fck) / fyk
    return max(rho_min * bw * d, RHO_MIN_ABSOLUTE * bw * h), rho_min


def _compression_steel(inputs: FlexureInput, d: float, limit: float, fcd: float,
                       fyd: float, md: float) -> dict:
    """Split Md into the concrete couple at x = limit*d and a steel-steel couple."""
    x = limit * d
    lever = d - LEVER_ARM_COEFF * x
    m1d = STRESS_BLOCK_FORCE * inputs.bw * x * fcd * lever
    m2d = md - m1d

    # Strain compatibility at the compression steel level
    epsilon_sc = EPSILON_CU * (x - inputs.d_prime) / x
    sigma_sd = min(fyd, epsilon_sc * ES)
    logger.debug("Compression steel: x=%.2f m1d=%.1f m2d=%.1f eps_sc=%.5f sigma_sd=%.2f",
                 x, m1d, m2d, epsilon_sc, sigma_sd)

    As_prime = m2d / (sigma_sd * (d - inputs.d_prime))
    As1 = m1d / (fyd * lever)
    As2 = As_prime * sigma_sd / fyd
    return {
        "x": x, "m1d": m1d, "m2d": m2d, "epsilon_sc": epsilon_sc, "sigma_sd": sigma_sd,
        "As_prime": As_prime, "As1": As1, "As2": As2, "As_calc": As1 + As2,
    }


def calculate_flexure(inputs: FlexureInput, allow_double_reinforcement: bool = False,
                      factors: SafetyFactors = NBR6118) -> FlexureResult:
    """
    Design the tension (and, if allowed, compression) steel of a rectangular beam.

    Args:
        inputs: Section, materials and characteristic moment.
        allow_double_reinforcement: When x/d exceeds the ductility limit, fix x
            at the limit and add compression steel instead of failing.
        factors: Partial safety factors.

    Returns:
        One of FlexureRejected, FlexureDuctilityFailure, FlexureDesign or
        FlexureDoublyReinforced. Areas in cm2, lengths in cm, moments in kN.cm.
    """
    logger.info("Flexure calc: mk=%.2f tf.m, bw=%.1f h=%.1f fck=%.0f", inputs.mk, inputs.bw, inputs.h, inputs.fck)

    errors = validate_positive({
        "bw": inputs.bw, "h": inputs.h, "fck": inputs.fck, "fyk": inputs.fyk,
        "mk": inputs.mk, "cover": inputs.cover, "d_prime": inputs.d_prime,
    })
    d = effective_depth(inputs.h, inputs.cover)
    if not errors and d <= 0:
        errors.append("Altura útil (d) inválida. Verifique a altura e o cobrimento.")
    if errors:
        logger.warning("Flexure input rejected: %s", errors)
        return FlexureRejected(
            status=FlexureStatus.ERROR_INPUT,
            message=" | ".join(errors),
            trace=(input_error_trace(errors),),
        )

    fcd = materials.fcd(inputs.fck, factors)
    fyd = materials.fyd(inputs.fyk, factors)
    md = tfm_to_kNcm(inputs.mk) * factors.gamma_f
    limit = x_d_limit(inputs.fck)

    trace: list[TraceCheck] = [
        TraceCheck(
            code_ref="NBR 6118:2014 item 12.3",
            formula_id="design_strengths",
            inputs={"fck_MPa": inputs.fck, "fyk_MPa": inputs.fyk,
                    "gamma_c": factors.gamma_c, "gamma_s": factors.gamma_s},
            value=fyd,
            units="kN/cm2",
            status="ok",
            note=f"fcd = {fcd:.4f} kN/cm2",
        )
    ]

    x = _solve_neutral_axis(inputs.bw, fcd, d, md)
    if x is None:
        logger.warning("Insufficient section: negative discriminant for Md=%.1f kN.cm", md)
        trace.append(
            TraceCheck(
                code_ref="NBR 6118:2014 item 17.2.2",
                formula_id="neutral_axis_quadratic_discriminant",
                inputs={"Md_kNcm": md, "bw_cm": inputs.bw, "d_cm": d},
                value=0.0,
                units="cm",
                status="error",
                note="Negative discriminant in the neutral axis equation.",
            )
        )
        return FlexureDuctilityFailure(
            status=FlexureStatus.ERROR_X_D_LIMIT,
            message=(
                "Erro: Seção de concreto insuficiente. O momento solicitante é maior que o momento "
                "resistente máximo. Aumente a seção ou adote armadura de compressão."
            ),
            trace=tuple(trace),
            d=d, x_d_limit=limit, fcd=fcd, fyd=fyd, md=md,
        )

    x_d_ratio = x / d
    ductile = x_d_ratio <= limit
    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 14.6.4.3",
            formula_id="x_d_ductility",
            inputs={"x_cm": x, "d_cm": d, "limit": limit},
            value=x_d_ratio,
            units="ratio",
            status="ok" if ductile else ("warning" if allow_double_reinforcement else "error"),
        )
    )

    As_min, rho_min = _compute_As_min(inputs.fck, inputs.fyk, inputs.bw, d, inputs.h)
    As_max = RHO_MAX * inputs.bw * inputs.h
    doubly = None

    if ductile:
        As_calc = md / (fyd * (d - LEVER_ARM_COEFF * x))
    elif not allow_double_reinforcement:
        logger.warning("Ductility limit exceeded: x/d=%.3f > %.2f", x_d_ratio, limit)
        return FlexureDuctilityFailure(
            status=FlexureStatus.ERROR_X_D_LIMIT,
            message=(
                f"Limite de ductilidade excedido (x/d = {x_d_ratio:.2f} > {limit}). A seção necessita "
                "de armadura de compressão. Recomenda-se aumentar as dimensões da viga."
            ),
            trace=tuple(trace),
            x=x, d=d, x_d_ratio=x_d_ratio, x_d_limit=limit, fcd=fcd, fyd=fyd, md=md,
        )
    else:
        x_lim = limit * d
        if inputs.d_prime >= x_lim:
            logger.warning("Compression steel outside the compressed zone: d'=%.2f x=%.2f", inputs.d_prime, x_lim)
            errors = [
                f"O cobrimento da armadura de compressão (d' = {inputs.d_prime:.2f} cm) deve ser "
                f"menor que a linha neutra limite (x = {x_lim:.2f} cm)."
            ]
            return FlexureRejected(
                status=FlexureStatus.ERROR_INPUT,
                message=" | ".join(errors),
                trace=tuple(trace) + (input_error_trace(errors),),
            )
        doubly = _compression_steel(inputs, d, limit, fcd, fyd, md)
        x = doubly["x"]
        x_d_ratio = limit
        As_calc = doubly["As_calc"]
        trace.append(
            TraceCheck(
                code_ref="NBR 6118:2014 item 17.2.2",
                formula_id="compression_steel_strain",
                inputs={"x_cm": x, "d_prime_cm": inputs.d_prime, "epsilon_cu": EPSILON_CU},
                value=doubly["sigma_sd"],
                units="kN/cm2",
                status="ok",
                note="yielded" if doubly["sigma_sd"] >= fyd else "not yielded",
            )
        )

    As = max(As_calc, As_min)
    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 17.3.5.2.1",
            formula_id="As_min",
            inputs={"fck_MPa": inputs.fck, "fyk_MPa": inputs.fyk, "bw_cm": inputs.bw,
                    "d_cm": d, "h_cm": inputs.h},
            value=As_min,
            units="cm2",
            status="warning" if As_calc < As_min else "ok",
        )
    )

    if As > As_max:
        status = FlexureStatus.ERROR_MAX_STEEL
        message = (
            f"Armadura máxima excedida (As = {As:.2f} cm² > {As_max:.2f} cm²). "
            "Aumente a seção de concreto."
        )
        logger.warning("Maximum steel exceeded: As=%.2f > %.2f", As, As_max)
    elif As_calc < As_min:
        status = FlexureStatus.WARNING_MIN_STEEL
        message = (
            f"Cálculo OK. A armadura calculada ({As_calc:.2f} cm²) é menor que a mínima. "
            "Adotada armadura mínima."
        )
    elif doubly is not None:
        status = FlexureStatus.SUCCESS_COMPRESSION_STEEL
        message = "Dimensionamento com armadura dupla concluído com sucesso."
    else:
        status = FlexureStatus.SUCCESS
        message = "Dimensionamento concluído com sucesso."

    trace.append(
        TraceCheck(
            code_ref="NBR 6118:2014 item 17.3.5.2.4",
            formula_id="As_max",
            inputs={"bw_cm": inputs.bw, "h_cm": inputs.h},
            value=As_max,
            units="cm2",
            status="error" if status == FlexureStatus.ERROR_MAX_STEEL else "ok",
        )
    )

    common = dict(
        status=status, message=message, trace=tuple(trace),
        As=As, As_calc=As_calc, As_min=As_min, As_max=As_max, rho_min=rho_min,
        x=x, d=d, x_d_ratio=x_d_ratio, x_d_limit=limit, fcd=fcd, fyd=fyd, md=md,
    )
    if doubly is None:
        return FlexureDesign(**common)

    return FlexureDoublyReinforced(
        **common,
        As_prime=doubly["As_prime"],
        m1d=doubly["m1d"],
        m2d=doubly["m2d"],
        epsilon_sc=doubly["epsilon_sc"],
        sigma_sd=doubly["sigma_sd"],
        As1=doubly["As1"],
        As2=doubly["As2"],
    )
