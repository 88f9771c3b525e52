import pandas as pd
import streamlit as st

from nbr_beam.models.calculation_memory import build_checklist, build_summary


def render_status_box(status_code: str, message: str) -> None:
    if status_code == "ok":
        st.success(message)
    elif status_code == "warning":
        st.warning(message)
    else:
        st.error(message)


def render_memory(title, steps):
    if not steps:
        return
    st.subheader(title)
    for step in steps:
        with st.container(border=True):
            st.markdown(f"**{step.title}**")
            st.code(step.formula, language=None)
            st.caption(step.calculation)
            if step.is_final:
                st.success(step.result)
            else:
                st.write(step.result)
            if step.note:
                st.caption(step.note)


def render_checklist(label, res):
    summary = build_summary(label, res)
    st.caption(f"Controla: {summary['critério_governante']}")
    rows = build_checklist(label, res)
    if rows:
        df = pd.DataFrame(rows, columns=["Verificação", "Item", "Fórmula", "Estado", "Valor", "Comentário"])
        st.table(df)
