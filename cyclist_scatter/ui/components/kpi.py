from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

import streamlit as st

from cyclist_scatter.ui.components.formatting import format_number, format_percent


@dataclass
class KpiCard:
    label: str
    value: Optional[float] = None
    value_display: Optional[str] = None
    decimals: int = 0
    help_text: Optional[str] = None


def _format_value(card: KpiCard) -> str:
    if card.value_display is not None:
        return card.value_display
    return format_number(card.value, decimals=card.decimals)


def diagnostics_cards(diagnostics: Dict[str, Any]) -> List[KpiCard]:
    """Turn dataset diagnostics into the summary cards shown above the chart."""
    total = diagnostics.get("records") or 0
    doping = diagnostics.get("doping_allegations") or 0
    share = doping / total * 100 if total else None
    cards = [
        KpiCard(label="Riders", value=total),
        KpiCard(
            label="Doping Allegations",
            value=doping,
            help_text=f"{format_percent(share)} of plotted ascents",
        ),
        KpiCard(label="Fastest Ascent", value_display=diagnostics.get("fastest_time") or "–"),
        KpiCard(label="Slowest Ascent", value_display=diagnostics.get("slowest_time") or "–"),
    ]
    extent = diagnostics.get("year_extent")
    if extent:
        cards.append(KpiCard(label="Years", value_display=f"{extent[0]}–{extent[1]}"))
    return cards


def render_kpi_cards(cards: Sequence[KpiCard], columns: int = 3) -> None:
    """
    Render KPI cards in a responsive grid using Streamlit columns.
    """
    cards = list(cards)
    if not cards:
        st.info("No summary available for this dataset.")
        return

    columns = max(columns, 1)
    for idx in range(0, len(cards), columns):
        row_cards = cards[idx: idx + columns]
        cols = st.columns(len(row_cards))
        for col, card in zip(cols, row_cards):
            with col:
                st.metric(label=card.label, value=_format_value(card))
                if card.help_text:
                    st.caption(card.help_text)
