from __future__ import annotations

import streamlit as st

from cyclist_scatter.data.dataset import dataset_diagnostics
from cyclist_scatter.ui.components.charts import build_scatter_figure, render_plotly
from cyclist_scatter.ui.components.kpi import diagnostics_cards, render_kpi_cards
from cyclist_scatter.ui.components.tables import render_table
from cyclist_scatter.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    render_kpi_cards(diagnostics_cards(dataset_diagnostics(context.records)), columns=5)

    fig = build_scatter_figure(context.records, context.scales)
    render_plotly(fig)

    with st.expander("Riders", expanded=False):
        render_table(context.frame)
