import streamlit as st

from nbr_beam.models import anchorage
from nbr_beam.models.calculation_memory import anchorage_memory
from nbr_beam.models.design_inputs import AnchorageType, BarType, BondCondition, SteelRatioOption
from nbr_beam.models.nbr_constants import BAR_DIAMETERS
from nbr_beam.models.result_types import AnchorageDesign
from nbr_beam.models.validation import hook_allowed
from nbr_beam.ui.design_state import get_design_snapshot, init_design_state, update_design_inputs
from nbr_beam.ui.widgets import render_checklist, render_memory, render_status_box

_BOND_LABELS = {BondCondition.GOOD: "Boa", BondCondition.POOR: "Má"}
_ANCHORAGE_LABELS = {AnchorageType.STRAIGHT: "Sem gancho", AnchorageType.HOOK: "Com gancho"}
_RATIO_LABELS = {SteelRatioOption.EQUAL: "A_s,calc = A_s,ef", SteelRatioOption.CUSTOM: "Informar A_s"}


def render():
    st.header("Comprimento de Ancoragem")
    init_design_state(st.session_state)
    snapshot = get_design_snapshot(st.session_state, "anchorage")

    col1, col2 = st.columns(2)
    with col1:
        diameters = list(BAR_DIAMETERS)
        index = diameters.index(snapshot.diameter) if snapshot.diameter in diameters else 0
        diameter = st.selectbox("Diâmetro Ø [mm]", diameters, index=index, key="anc_phi")
        fck = st.number_input("f_ck [MPa]", 0.0, 90.0, snapshot.fck, 5.0, key="anc_fck")
        bar_type = BarType(st.radio("Tipo de aço", [b.value for b in BarType],
                                    index=list(BarType).index(snapshot.bar_type), key="anc_bar"))
        bond = st.radio("Aderência", list(BondCondition), format_func=_BOND_LABELS.get,
                        index=list(BondCondition).index(snapshot.bond_condition), key="anc_bond")
    with col2:
        ratio_option = st.radio("Armadura", list(SteelRatioOption), format_func=_RATIO_LABELS.get,
                                index=list(SteelRatioOption).index(snapshot.steel_ratio_option), key="anc_ratio")
        as_calc, as_eff = snapshot.as_calc, snapshot.as_eff
        if ratio_option == SteelRatioOption.CUSTOM:
            as_calc = st.number_input("A_s,calc [cm²]", 0.0, None, as_calc, 0.1, key="anc_as_calc")
            as_eff = st.number_input("A_s,ef [cm²]", 0.0, None, as_eff, 0.1, key="anc_as_eff")

        # Plain bars are always anchored straight
        options = list(AnchorageType) if hook_allowed(bar_type) else [AnchorageType.STRAIGHT]
        current = snapshot.anchorage_type if snapshot.anchorage_type in options else AnchorageType.STRAIGHT
        anchorage_type = st.radio("Ancoragem", options, format_func=_ANCHORAGE_LABELS.get,
                                  index=options.index(current), key=f"anc_type_{len(options)}")

    update_design_inputs(st.session_state, "anchorage", diameter=diameter, fck=fck, bar_type=bar_type.value,
                         bond_condition=bond.value, steel_ratio_option=ratio_option.value,
                         as_calc=as_calc, as_eff=as_eff, anchorage_type=anchorage_type.value)
    inputs = get_design_snapshot(st.session_state, "anchorage")
    res = anchorage.calculate_anchorage(inputs)

    st.divider()
    render_status_box(res.status_code, res.message)

    if isinstance(res, AnchorageDesign):
        c1, c2, c3 = st.columns(3)
        c1.metric("l_b,nec", f"{res.lb_nec:.1f} cm")
        c2.metric("l_b", f"{res.lb:.1f} cm")
        c3.metric("l_b,min", f"{res.lb_min:.1f} cm")

    render_memory("Memória de Cálculo", anchorage_memory(res))
    render_checklist("Ancoragem", res)
