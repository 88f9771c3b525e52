import streamlit as st

from nbr_beam.models import shear
from nbr_beam.models.calculation_memory import shear_memory
from nbr_beam.models.nbr_constants import STIRRUP_DIAMETERS
from nbr_beam.models.result_types import ShearDesign
from nbr_beam.ui import plotting
from nbr_beam.ui.design_state import get_design_snapshot, init_design_state, update_design_inputs
from nbr_beam.ui.widgets import render_checklist, render_memory, render_status_box


def render():
    st.header("Cisalhamento (Estribos)")
    init_design_state(st.session_state)
    snapshot = get_design_snapshot(st.session_state, "shear")

    col1, col2 = st.columns(2)
    with col1:
        bw = st.number_input("Largura b_w [cm]", 0.0, None, snapshot.bw, 1.0, key="shear_bw")
        h = st.number_input("Altura h [cm]", 0.0, None, snapshot.h, 1.0, key="shear_h")
        fck = st.number_input("f_ck [MPa]", 0.0, 90.0, snapshot.fck, 5.0, key="shear_fck")
        cover = st.number_input("Cobrimento [cm]", 0.0, None, snapshot.cover, 0.5, key="shear_cover")
    with col2:
        fyk = st.number_input("f_ywk [MPa]", 0.0, None, snapshot.fyk, 10.0, key="shear_fyk")
        vk = st.number_input("Cortante V_k [tf]", 0.0, None, snapshot.vk, 0.5, key="shear_vk")
        diameters = list(STIRRUP_DIAMETERS)
        index = diameters.index(snapshot.stirrup_diameter) if snapshot.stirrup_diameter in diameters else 0
        stirrup_diameter = st.selectbox("Diâmetro do estribo [mm]", diameters, index=index, key="shear_phi")
        num_legs = st.number_input("Nº de ramos", 1, 6, snapshot.num_legs, key="shear_legs")

    update_design_inputs(st.session_state, "shear", bw=bw, h=h, fck=fck, fyk=fyk, vk=vk, cover=cover,
                         stirrup_diameter=stirrup_diameter, num_legs=num_legs)
    inputs = get_design_snapshot(st.session_state, "shear")
    res = shear.calculate_shear(inputs)

    st.divider()
    render_status_box(res.status_code, res.message)

    if isinstance(res, ShearDesign):
        c1, c2 = st.columns(2)
        with c1:
            st.metric("Espaçamento adotado", f"{res.s_adopted:.1f} cm")
            st.metric("V_d / V_Rd2", f"{res.vd:.1f} / {res.vrd2:.1f} kN")
            st.metric("V_c", f"{res.vc:.2f} kN")
            st.metric("V_sw", f"{res.vsw:.2f} kN")
        with c2:
            fig = plotting.draw_stirrup_layout(inputs.bw, inputs.h, inputs.cover, res.s_adopted, inputs.num_legs)
            st.pyplot(fig)

    render_memory("Memória de Cálculo", shear_memory(res))
    render_checklist("Cisalhamento", res)
