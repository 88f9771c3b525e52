from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any

from nbr_beam.models.nbr_constants import NBR6118, SafetyFactors
from nbr_beam.models.result_types import (
    AnchorageDesign,
    FlexureDesign,
    FlexureDuctilityFailure,
    MinimumSteelDesign,
    ResultBase,
    ShearDesign,
    ShearStrutFailure,
)
from nbr_beam.models.units import kN_cm2_to_MPa, kNcm_to_kNm


@dataclass(frozen=True)
class CalculationStep:
    title: str
    formula: str
    calculation: str
    result: str
    note: str = ""
    is_final: bool = False

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _state_from_status_code(status_code: str) -> str:
    if status_code == "ok":
        return "atende"
    if status_code == "warning":
        return "advertência"
    if status_code == "error":
        return "não atende"
    return "pendente"


def _fmt_spacing(s: float) -> str:
    return "∞" if math.isinf(s) else f"{s:.2f} cm"


def flexure_memory(res: ResultBase, bw: float, d_prime: float = 0.0,
                   factors: SafetyFactors = NBR6118) -> list[CalculationStep]:
    """Calculation memory of a flexure result; empty for rejected input."""
    if not isinstance(res, (FlexureDesign, FlexureDuctilityFailure)):
        return []

    steps = [
        CalculationStep(
            title="Resistências de Cálculo dos Materiais",
            formula="f_cd = f_ck / γ_c; f_yd = f_yk / γ_s",
            calculation=f"γ_c = {factors.gamma_c}; γ_s = {factors.gamma_s}",
            result=f"f_cd = {kN_cm2_to_MPa(res.fcd):.2f} MPa; f_yd = {kN_cm2_to_MPa(res.fyd):.2f} MPa",
        ),
        CalculationStep(
            title="Momento Fletor de Cálculo (Md)",
            formula="M_d = M_k ⋅ γ_f",
            calculation=f"γ_f = {factors.gamma_f}",
            result=f"M_d = {kNcm_to_kNm(res.md):.2f} kN.m",
        ),
    ]

    if isinstance(res, FlexureDuctilityFailure):
        if res.x == 0.0:
            steps.append(CalculationStep(
                title="Posição da Linha Neutra (x)",
                formula="0.272⋅b_w⋅f_cd⋅x² - 0.68⋅b_w⋅f_cd⋅d⋅x + M_d = 0",
                calculation="Discriminante negativo",
                result="Seção insuficiente",
                note=f"Altura útil (d) = {res.d:.2f} cm",
                is_final=True,
            ))
        else:
            steps.append(CalculationStep(
                title="Verificação de Ductilidade (x/d)",
                formula="(x/d) ≤ (x/d)_lim",
                calculation=f"{res.x:.2f} / {res.d:.2f} = {res.x_d_ratio:.3f}",
                result=f"{res.x_d_ratio:.3f} > {res.x_d_limit}",
                is_final=True,
            ))
        return steps

    if res.doubly_reinforced:
        yielded = res.sigma_sd >= res.fyd
        steps += [
            CalculationStep(
                title="Fixar Linha Neutra no Limite (x)",
                formula="x = (x/d)_lim ⋅ d",
                calculation=f"x = {res.x_d_limit} ⋅ {res.d:.2f}",
                result=f"x = {res.x:.2f} cm",
            ),
            CalculationStep(
                title="Momento da Parcela Concreto-Aço (M1d)",
                formula="M_1d = 0.68⋅b_w⋅x⋅f_cd⋅(d - 0.4⋅x)",
                calculation=f"M_1d = 0.68⋅{bw}⋅{res.x:.2f}⋅{res.fcd:.2f}⋅({res.d:.2f} - 0.4⋅{res.x:.2f})",
                result=f"M_1d = {kNcm_to_kNm(res.m1d):.2f} kN.m",
            ),
            CalculationStep(
                title="Momento da Parcela Aço-Aço (M2d)",
                formula="M_2d = M_d - M_1d",
                calculation=f"M_2d = {kNcm_to_kNm(res.md):.2f} - {kNcm_to_kNm(res.m1d):.2f}",
                result=f"M_2d = {kNcm_to_kNm(res.m2d):.2f} kN.m",
            ),
            CalculationStep(
                title="Tensão na Armadura de Compressão (σ_sd)",
                formula="σ_sd = ε_sc ⋅ E_s ≤ f_yd",
                calculation=f"ε_sc = {res.epsilon_sc:.5f}; σ_sd = {res.sigma_sd:.2f} kN/cm²",
                result="Armadura escoou" if yielded else "Armadura não escoou",
            ),
            CalculationStep(
                title="Área de Aço de Compressão (A's)",
                formula="A'_s = M_2d / (σ_sd ⋅ (d - d'))",
                calculation=f"A'_s = {res.m2d:.2f} / ({res.sigma_sd:.2f} ⋅ ({res.d:.2f} - {d_prime}))",
                result=f"A'_s = {res.As_prime:.2f} cm²",
            ),
            CalculationStep(
                title="Parcelas da Armadura de Tração (As1 + As2)",
                formula="A_s1 = M_1d / (f_yd⋅(d - 0.4⋅x)); A_s2 = (A'_s ⋅ σ_sd) / f_yd",
                calculation=f"A_s1 = {res.As1:.2f} cm²; A_s2 = {res.As2:.2f} cm²",
                result=f"A_s,calc = {res.As1:.2f} + {res.As2:.2f} = {res.As_calc:.2f} cm²",
            ),
        ]
    else:
        steps += [
            CalculationStep(
                title="Posição da Linha Neutra (x)",
                formula="0.272⋅b_w⋅f_cd⋅x² - 0.68⋅b_w⋅f_cd⋅d⋅x + M_d = 0",
                calculation="Resolvendo a equação de 2º grau para x",
                result=f"x = {res.x:.2f} cm",
                note=f"Altura útil (d) = {res.d:.2f} cm",
            ),
            CalculationStep(
                title="Verificação de Ductilidade (x/d)",
                formula="(x/d) ≤ (x/d)_lim",
                calculation=f"{res.x:.2f} / {res.d:.2f} = {res.x_d_ratio:.3f}",
                result=f"{res.x_d_ratio:.3f} ≤ {res.x_d_limit}",
            ),
            CalculationStep(
                title="Área de Aço Calculada (As,calc)",
                formula="A_s,calc = M_d / (f_yd ⋅ (d - 0.4⋅x))",
                calculation=f"A_s,calc = {res.md:.2f} / ({res.fyd:.2f} ⋅ ({res.d:.2f} - 0.4⋅{res.x:.2f}))",
                result=f"A_s,calc = {res.As_calc:.2f} cm²",
            ),
            CalculationStep(
                title="Armadura Mínima (As,min)",
                formula="A_s,min = max(ρ_min ⋅ b_w ⋅ d, 0.15% ⋅ b_w ⋅ h)",
                calculation=f"ρ_min = {res.rho_min:.5f}",
                result=f"A_s,min = {res.As_min:.2f} cm²",
            ),
        ]

    steps.append(CalculationStep(
        title="Área de Aço Final (As)",
        formula="A_s = max(A_s,calc, A_s,min) ≤ A_s,max",
        calculation=f"A_s = max({res.As_calc:.2f}, {res.As_min:.2f})",
        result=f"A_s = {res.As:.2f} cm²",
        note=f"A_s,max = {res.As_max:.2f} cm²",
        is_final=True,
    ))
    return steps


def shear_memory(res: ResultBase) -> list[CalculationStep]:
    if not isinstance(res, (ShearDesign, ShearStrutFailure)):
        return []

    steps = [
        CalculationStep(
            title="Verificação da Biela Comprimida (VRd2)",
            formula="V_Rd2 = 0.27 ⋅ α_v2 ⋅ f_cd ⋅ b_w ⋅ d; α_v2 = 1 - f_ck/250",
            calculation=f"α_v2 = {res.alpha_v2:.3f}; d = {res.d:.2f} cm",
            result=f"V_d = {res.vd:.2f} kN {'≤' if res.vd <= res.vrd2 else '>'} V_Rd2 = {res.vrd2:.2f} kN",
            is_final=isinstance(res, ShearStrutFailure),
        )
    ]
    if isinstance(res, ShearStrutFailure):
        return steps

    steps += [
        CalculationStep(
            title="Parcela do Concreto (Vc)",
            formula="V_c = 0.6 ⋅ f_ctd ⋅ b_w ⋅ d",
            calculation=f"f_ctd = {res.fctd:.4f} kN/cm²",
            result=f"V_c = {res.vc:.2f} kN",
        ),
        CalculationStep(
            title="Parcela dos Estribos (Vsw)",
            formula="V_sw = max(0, V_d - V_c)",
            calculation=f"V_sw = max(0, {res.vd:.2f} - {res.vc:.2f})",
            result=f"V_sw = {res.vsw:.2f} kN",
        ),
        CalculationStep(
            title="Espaçamento Calculado (s_calc)",
            formula="s = A_sw ⋅ 0.9 ⋅ d ⋅ f_ywd / V_sw",
            calculation=f"A_sw = {res.asw:.3f} cm²; f_ywd = {res.fywd:.2f} kN/cm²",
            result=f"s_calc = {_fmt_spacing(res.s_calc)}",
        ),
        CalculationStep(
            title="Espaçamento pela Armadura Mínima",
            formula="s = A_sw / (ρ_sw,min ⋅ b_w); ρ_sw,min = 0.2 ⋅ f_ctm / f_ywk",
            calculation=f"(A_sw/s)_min = {res.asw_s_min:.4f} cm²/cm",
            result=f"s = {_fmt_spacing(res.s_for_min_area)}",
        ),
        CalculationStep(
            title="Espaçamento Máximo (s_max)",
            formula="V_d ≤ 0.67 V_Rd2: min(0.6d, 30); senão min(0.3d, 20)",
            calculation=f"0.67 ⋅ V_Rd2 = {0.67 * res.vrd2:.2f} kN",
            result=f"s_max = {_fmt_spacing(res.s_max)}",
        ),
        CalculationStep(
            title="Espaçamento Adotado",
            formula="s = min(s_calc, s_mín, s_max)",
            calculation=(
                f"s = min({_fmt_spacing(res.s_calc)}, {_fmt_spacing(res.s_for_min_area)}, "
                f"{_fmt_spacing(res.s_max)})"
            ),
            result=f"s = {_fmt_spacing(res.s_adopted)}",
            is_final=True,
        ),
    ]
    return steps


def anchorage_memory(res: ResultBase) -> list[CalculationStep]:
    if not isinstance(res, AnchorageDesign):
        return []
    return [
        CalculationStep(
            title="Resistência de Aderência (fbd)",
            formula="f_bd = η1 ⋅ η2 ⋅ η3 ⋅ f_ctd",
            calculation=f"f_bd = {res.n1} ⋅ {res.n2} ⋅ {res.n3:.2f} ⋅ {res.fctd:.4f}",
            result=f"f_bd = {res.fbd:.4f} kN/cm²",
        ),
        CalculationStep(
            title="Comprimento de Ancoragem Básico (lb)",
            formula="l_b = (φ/4) ⋅ (f_yd / f_bd)",
            calculation=f"l_b = ({res.phi:.2f}/4) ⋅ ({res.fyd:.2f} / {res.fbd:.4f})",
            result=f"l_b = {res.lb:.1f} cm",
        ),
        CalculationStep(
            title="Comprimento Mínimo (lb,min)",
            formula="l_b,min = max(0.3⋅l_b, 10φ, 10 cm)",
            calculation=f"max({0.3 * res.lb:.1f}, {10 * res.phi:.1f}, 10)",
            result=f"l_b,min = {res.lb_min:.1f} cm",
        ),
        CalculationStep(
            title="Comprimento Necessário (lb,nec)",
            formula="l_b,nec = α ⋅ l_b ⋅ A_s,calc / A_s,ef ≥ l_b,min",
            calculation=f"l_b,nec = {res.alpha} ⋅ {res.lb:.1f} ⋅ {res.steel_ratio:.3f} = {res.lb_nec_calc:.1f}",
            result=f"l_b,nec = {res.lb_nec:.1f} cm",
            is_final=True,
        ),
    ]


def minimum_steel_memory(res: ResultBase) -> list[CalculationStep]:
    if not isinstance(res, MinimumSteelDesign):
        return []
    return [
        CalculationStep(
            title="Taxa Mínima (Tabela 17.3)",
            formula="A_s,min = ρ_min ⋅ b_w ⋅ h",
            calculation=f"ρ_min = {res.rho_min_percent:.3f} %",
            result=f"A_s,min = {res.as_min_by_rate:.2f} cm²",
        ),
        CalculationStep(
            title="Linha Neutra (x)",
            formula="0.68 ⋅ b_w ⋅ x ⋅ f_cd = A_s ⋅ f_yd",
            calculation=f"d = {res.d:.2f} cm",
            result=f"x = {res.x:.2f} cm",
        ),
        CalculationStep(
            title="Momento Resistente (Md)",
            formula="M_d = A_s ⋅ f_yd ⋅ (d - 0.4⋅x)",
            calculation=f"M_d = {res.md_resisted_kn_cm:.1f} kN.cm",
            result=f"M_d = {res.md_resisted:.2f} tf.m",
            note=f"W = {res.w:.1f} cm³",
            is_final=True,
        ),
    ]


def _criterion_from_result(res: ResultBase) -> str:
    if res.status_code == "error":
        return "Seção insuficiente"
    if isinstance(res, FlexureDesign) and res.As <= res.As_min + 1e-9:
        return "Governa armadura mínima"
    if isinstance(res, ShearDesign) and res.s_adopted < res.s_calc:
        return "Governa armadura mínima / espaçamento máximo"
    return "Governa solicitação"


def build_summary(label: str, res: ResultBase) -> dict[str, Any]:
    return {
        "verificação": label,
        "estado": _state_from_status_code(res.status_code),
        "critério_governante": _criterion_from_result(res),
        "mensagem": res.message,
    }


def build_checklist(label: str, res: ResultBase) -> list[dict[str, str]]:
    """One row per trace check, ready for a pandas table."""
    rows: list[dict[str, str]] = []
    for check in res.trace:
        rows.append(
            {
                "Verificação": label,
                "Item": check.code_ref,
                "Fórmula": check.formula_id,
                "Estado": _state_from_status_code(check.status),
                "Valor": f"{check.value:.4g} {check.units}",
                "Comentário": check.note,
            }
        )
    return rows
