import logging

import streamlit as st

from cyclist_scatter.bootstrap_env import ensure_env
from cyclist_scatter.config import CHART_DIMENSIONS
from cyclist_scatter.data.dataset import build_dataset, dataset_to_frame
from cyclist_scatter.data.loader import clear_cache, load_raw_records
from cyclist_scatter.data.scales import compute_scales, inner_size
from cyclist_scatter.errors import FetchError, ScatterPlotError
from cyclist_scatter.ui.layout import PAGE_SUBTITLE, PAGE_TITLE, setup_page, sidebar_ui
from cyclist_scatter.ui.pages import scatter
from cyclist_scatter.ui.pages.context import PageContext

logger = logging.getLogger(__name__)


def _error_message(exc: ScatterPlotError) -> str:
    if isinstance(exc, FetchError):
        return f"Could not download the cyclist dataset. {exc}"
    return f"The cyclist dataset could not be plotted. {exc}"


def build_context() -> PageContext:
    raw = load_raw_records()
    records = build_dataset(raw)
    width, height = inner_size(CHART_DIMENSIONS)
    scales = compute_scales(records, width, height)
    return PageContext(records=records, scales=scales, frame=dataset_to_frame(records))


def main() -> None:
    ensure_env()
    setup_page()
    st.title(PAGE_TITLE)
    st.caption(PAGE_SUBTITLE)

    if sidebar_ui():
        clear_cache()

    try:
        with st.spinner("Loading ascent times…"):
            context = build_context()
    except ScatterPlotError as exc:
        logger.exception("Unable to build the scatter plot")
        st.error(_error_message(exc))
        return

    logger.info("Rendering %d records", len(context.records))
    scatter.render(context)


if __name__ == "__main__":
    main()
