import streamlit as st

from nbr_beam.models.converter import as_per_meter_for, convert_spacing
from nbr_beam.models.design_inputs import ConverterInput, ConverterMode
from nbr_beam.models.nbr_constants import BAR_DIAMETERS, STIRRUP_DIAMETERS
from nbr_beam.ui import plotting

_DEFAULTS = {
    ConverterMode.LONGITUDINAL: ConverterInput(),
    ConverterMode.STIRRUP: ConverterInput(
        mode=ConverterMode.STIRRUP, original_diameter=6.3, original_spacing=15.0, equivalent_diameter=8.0,
    ),
}


def _diameter_select(label, options, value, key):
    index = options.index(value) if value in options else 0
    return st.selectbox(label, options, index=index, key=key)


def render():
    st.header("Conversor de Armadura")
    mode = st.radio("Modo", list(ConverterMode), horizontal=True,
                    format_func=lambda m: "Longitudinal" if m == ConverterMode.LONGITUDINAL else "Estribos",
                    key="conv_mode")
    defaults = _DEFAULTS[mode]
    stirrup = mode == ConverterMode.STIRRUP
    options = list(STIRRUP_DIAMETERS if stirrup else BAR_DIAMETERS)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("#### Armadura Original")
        original_diameter = _diameter_select("Bitola [mm]", options, defaults.original_diameter,
                                             f"conv_orig_phi_{mode.value}")
        original_legs = defaults.original_num_legs
        if stirrup:
            original_legs = st.number_input("Nº de ramos", 1, None, original_legs, key="conv_orig_legs")
        original_spacing = st.number_input("Espaçamento [cm]", 0.0, None, defaults.original_spacing, 0.1,
                                           key=f"conv_orig_s_{mode.value}")
    with col2:
        st.markdown("#### Armadura Equivalente")
        equivalent_diameter = _diameter_select("Bitola [mm]", options, defaults.equivalent_diameter,
                                               f"conv_eq_phi_{mode.value}")
        equivalent_legs = defaults.equivalent_num_legs
        if stirrup:
            equivalent_legs = st.number_input("Nº de ramos", 1, None, equivalent_legs, key="conv_eq_legs")
        truncate = st.checkbox("Truncar resultado (arredondar p/ baixo)", key="conv_truncate")

    inputs = ConverterInput(
        mode=mode,
        original_diameter=original_diameter,
        original_spacing=original_spacing,
        equivalent_diameter=equivalent_diameter,
        original_num_legs=original_legs,
        equivalent_num_legs=equivalent_legs,
        truncate=truncate,
    )
    result = convert_spacing(inputs)

    st.divider()
    if result is None:
        st.info("Informe valores positivos para converter.")
        return

    legs = equivalent_legs if stirrup else 1
    c1, c2, c3 = st.columns(3)
    c1.metric("Espaçamento equivalente", f"{result.spacing:.2f} cm")
    c2.metric("A_s original", f"{result.as_per_meter:.2f} cm²/m")
    c3.metric("A_s equivalente", f"{as_per_meter_for(equivalent_diameter, result.spacing, legs):.2f} cm²/m")

    fig = plotting.draw_converter_comparison(original_diameter, original_spacing, equivalent_diameter,
                                             result.spacing)
    st.pyplot(fig)
