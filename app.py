import logging
import streamlit as st
from nbr_beam.ui.tabs import anchorage_tab, converter_tab, flexure_tab, minimum_steel_tab, shear_tab

logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")

# Page Config
st.set_page_config(page_title="Vigas de Concreto Armado - NBR 6118", page_icon="🏗️", layout="wide")

st.title("🏗️ Calculadora de Vigas de Concreto Armado")
st.caption("Dimensionamento conforme a NBR 6118:2014")

tab_flexure, tab_shear, tab_anchorage, tab_min, tab_converter = st.tabs(
    ["🔄 Flexão", "✂️ Cisalhamento", "⚓ Ancoragem", "📏 Armadura Mínima", "🔁 Conversor"]
)

with tab_flexure:
    flexure_tab.render()

with tab_shear:
    shear_tab.render()

with tab_anchorage:
    anchorage_tab.render()

with tab_min:
    minimum_steel_tab.render()

with tab_converter:
    converter_tab.render()

st.divider()
st.caption(
    "Esta ferramenta é para fins educacionais e de estudo. Os resultados devem ser verificados por um "
    "engenheiro qualificado antes do uso em projetos reais."
)
