import streamlit as st

from nbr_beam.models import minimum_steel
from nbr_beam.models.calculation_memory import minimum_steel_memory
from nbr_beam.models.nbr_constants import FCK_VALUES
from nbr_beam.models.result_types import MinimumSteelDesign
from nbr_beam.ui.design_state import get_design_snapshot, init_design_state, update_design_inputs
from nbr_beam.ui.widgets import render_memory, render_status_box


def render():
    st.header("Armadura Mínima")
    init_design_state(st.session_state)
    snapshot = get_design_snapshot(st.session_state, "minimum_steel")

    col1, col2 = st.columns(2)
    with col1:
        bw = st.number_input("Base b_w [cm]", 0.0, None, snapshot.bw, 1.0, key="min_bw")
        h = st.number_input("Altura h [cm]", 0.0, None, snapshot.h, 1.0, key="min_h")
        d_h_ratio = st.number_input("d/h", 0.0, 1.0, snapshot.d_h_ratio, 0.01, key="min_dh",
                                    help="Relação entre altura útil e altura total da viga. Ex: 0.8")
    with col2:
        values = [float(v) for v in FCK_VALUES]
        index = values.index(snapshot.fck) if snapshot.fck in values else 0
        fck = st.selectbox("f_ck [MPa]", values, index=index, key="min_fck")
        fyk = st.number_input("f_y [MPa]", 0.0, None, snapshot.fyk, 10.0, key="min_fyk")

    update_design_inputs(st.session_state, "minimum_steel", bw=bw, h=h, fck=fck, fyk=fyk, d_h_ratio=d_h_ratio)
    res = minimum_steel.calculate_minimum_steel(get_design_snapshot(st.session_state, "minimum_steel"))

    st.divider()
    render_status_box(res.status_code, res.message)

    if isinstance(res, MinimumSteelDesign):
        c1, c2 = st.columns(2)
        with c1:
            st.markdown("#### Taxa de Armadura")
            st.metric("Taxa mínima", f"{res.rho_min_percent:.3f} %")
            st.metric("A_s,mín", f"{res.as_min_by_rate:.2f} cm²")
        with c2:
            st.markdown("#### Momento Mínimo")
            st.metric("Módulo de resistência", f"{res.w:.1f} cm³")
            st.metric("Momento resistido", f"{res.md_resisted:.2f} tf.m")
            st.metric("Linha neutra", f"{res.x:.2f} cm")

    render_memory("Memória de Cálculo", minimum_steel_memory(res))
