"""
Reusable helpers for rendering the rider table with consistent configuration.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st

TABLE_COLUMNS = {
    "name": "Rider",
    "country": "Country",
    "year": "Year",
    "time_label": "Time",
    "doping": "Doping Allegation",
    "url": "Source",
}


def records_table(df: pd.DataFrame) -> pd.DataFrame:
    """Select and rename the columns shown to the user, keeping row order."""
    if df.empty:
        return pd.DataFrame(columns=list(TABLE_COLUMNS.values()))
    table = df[list(TABLE_COLUMNS)].rename(columns=TABLE_COLUMNS)
    table["Source"] = table["Source"].where(table["Source"] != "", None)
    return table


def render_table(
    df: pd.DataFrame,
    height: int = 400,
    export_file_name: str = "cyclist-ascents.csv",
) -> None:
    if df.empty:
        st.info("No records to display.")
        return

    st.dataframe(
        records_table(df),
        use_container_width=True,
        height=height,
        hide_index=True,
        column_config={
            "Year": st.column_config.NumberColumn(format="%d"),
            "Source": st.column_config.LinkColumn(display_text="Open"),
        },
    )

    csv_bytes = df.to_csv(index=False).encode("utf-8")
    st.download_button(
        "Download CSV",
        data=csv_bytes,
        file_name=export_file_name,
        mime="text/csv",
    )
