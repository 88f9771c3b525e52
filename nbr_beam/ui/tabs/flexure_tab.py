import streamlit as st

from nbr_beam.models.calculation_memory import flexure_memory
from nbr_beam.models.design_inputs import AggressivenessClass
from nbr_beam.models.result_types import FlexureDesign, FlexureStatus
from nbr_beam.ui import plotting
from nbr_beam.ui.design_state import (
    FLEXURE_AGGRESSIVENESS_KEY,
    default_cover_for,
    design_flexure,
    get_design_snapshot,
    reset_design_inputs,
    seed_widget_state,
    update_design_inputs,
)
from nbr_beam.ui.widgets import render_checklist, render_memory, render_status_box


def _on_aggressiveness_change():
    cls = AggressivenessClass(st.session_state[FLEXURE_AGGRESSIVENESS_KEY])
    st.session_state["flex_cover"] = default_cover_for(cls)


def render():
    st.header("Flexão Simples")
    # Keyed widgets read their values from session state
    seed_widget_state(st.session_state, "flexure")

    col1, col2 = st.columns(2)
    with col1:
        bw = st.number_input("Largura b_w [cm]", 0.0, None, step=1.0, key="flex_bw")
        h = st.number_input("Altura h [cm]", 0.0, None, step=1.0, key="flex_h")
        fck = st.number_input("f_ck [MPa]", 0.0, 90.0, step=5.0, key="flex_fck")
        fyk = st.number_input("f_yk [MPa]", 0.0, None, step=10.0, key="flex_fyk")
    with col2:
        mk = st.number_input("Momento M_k [tf.m]", 0.0, None, step=0.5, key="flex_mk")
        st.selectbox(
            "Classe de Agressividade",
            [c.value for c in AggressivenessClass],
            key=FLEXURE_AGGRESSIVENESS_KEY,
            on_change=_on_aggressiveness_change,
        )
        cover = st.number_input("Cobrimento c [cm]", 0.0, None, step=0.5, key="flex_cover")
        d_prime = st.number_input("Cobrimento comp. d' [cm]", 0.0, None, step=0.5, key="flex_d_prime")

    update_design_inputs(st.session_state, "flexure", bw=bw, h=h, fck=fck, fyk=fyk, mk=mk,
                         cover=cover, d_prime=d_prime)
    st.button("Limpar", key="flex_reset", on_click=reset_design_inputs, args=(st.session_state, "flexure"))

    inputs = get_design_snapshot(st.session_state, "flexure")
    res = design_flexure(inputs, st.session_state["force_double_reinforcement"])

    st.divider()
    render_status_box(res.status_code, res.message)

    if res.status == FlexureStatus.ERROR_X_D_LIMIT and res.x > 0:
        if st.button("Dimensionar com Armadura Dupla", key="flex_force_double"):
            st.session_state["force_double_reinforcement"] = True
            st.rerun()
        st.caption("Isto irá fixar x/d no limite e calcular a armadura de compressão necessária.")

    if isinstance(res, FlexureDesign):
        c1, c2 = st.columns(2)
        with c1:
            if res.doubly_reinforced:
                st.metric("A's (compressão)", f"{res.As_prime:.2f} cm²")
            st.metric("A_s (tração)", f"{res.As:.2f} cm²")
            st.metric("x", f"{res.x:.2f} cm")
            st.metric("d", f"{res.d:.2f} cm")
            st.metric("x/d", f"{res.x_d_ratio:.2f}", help=f"Limite: {res.x_d_limit}")
            st.metric("A_s,min / A_s,max", f"{res.As_min:.2f} / {res.As_max:.2f} cm²")
        with c2:
            fig = plotting.draw_beam_section_flexure(
                inputs.bw, inputs.h, inputs.cover, res.d, res.x, res.As, res.get("As_prime", 0.0)
            )
            st.pyplot(fig)

    title = "Memória de Cálculo (Armadura Dupla)" if res.status == FlexureStatus.SUCCESS_COMPRESSION_STEEL \
        else "Memória de Cálculo"
    render_memory(title, flexure_memory(res, inputs.bw, inputs.d_prime))
    render_checklist("Flexão", res)
