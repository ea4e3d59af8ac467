"""
Plotly figure factory for the ascent time scatter plot.

The figure is laid out in pixel space: every coordinate goes through the
computed scales, and the axes only relabel pixel ticks with years and
"MM:SS" times.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

import plotly.graph_objects as go
import streamlit as st

from cyclist_scatter.config import (
    CHART_DIMENSIONS,
    CLEAN_RIDER_NOTE,
    LEGEND_COLORS,
    LEGEND_LABELS,
    LEGEND_ORDER,
    TRANSITION,
    Y_AXIS_LABEL,
    ChartDimensions,
    TransitionConfig,
)
from cyclist_scatter.data.records import DomainRecord
from cyclist_scatter.data.scales import ChartScales
from cyclist_scatter.ui.animation import DotState, dot_states, frame_times
from cyclist_scatter.ui.components.formatting import format_ascent_time, format_year_tick

DEFAULT_TEMPLATE = "plotly_white"
GRID_COLOR = "#cccccc"


def tooltip_lines(record: DomainRecord) -> Tuple[str, str]:
    headline = (
        f"{record.name} ({record.country}). "
        f"In {record.year} he made it in {format_ascent_time(record.time, tooltip=True)}."
    )
    sub = f"{record.doping or CLEAN_RIDER_NOTE}."
    return headline, sub


def _group_indices(records: Sequence[DomainRecord]) -> Dict[bool, List[int]]:
    groups: Dict[bool, List[int]] = {key: [] for key in LEGEND_ORDER}
    for idx, record in enumerate(records):
        groups[record.has_doping_allegation].append(idx)
    return groups


def _trace_data(states: Sequence[DotState], indices: Sequence[int], color: Optional[str] = None) -> dict:
    marker = dict(
        size=[states[i].r * 2 for i in indices],
        opacity=[states[i].opacity for i in indices],
    )
    if color:
        marker["color"] = color
    return dict(
        x=[states[i].cx for i in indices],
        y=[states[i].cy for i in indices],
        marker=marker,
    )


def _configure_layout(
    fig: go.Figure,
    scales: ChartScales,
    dimensions: ChartDimensions,
    title: Optional[str] = None,
) -> go.Figure:
    x_ticks = scales.x.ticks()
    y_ticks = scales.y.ticks()
    fig.update_layout(
        template=DEFAULT_TEMPLATE,
        title=title,
        width=dimensions.width,
        height=dimensions.height,
        margin=dict(
            l=dimensions.margin.left,
            r=dimensions.margin.right,
            t=dimensions.margin.top,
            b=dimensions.margin.bottom,
        ),
        hovermode="closest",
        legend=dict(yanchor="top", y=0.95, xanchor="right", x=1),
    )
    fig.update_xaxes(
        range=list(scales.x_range),
        tickmode="array",
        tickvals=[scales.x(t) for t in x_ticks],
        ticktext=[format_year_tick(t) for t in x_ticks],
        showgrid=False,
        zeroline=False,
    )
    # Pixel 0 on top: faster ascents sit higher
    fig.update_yaxes(
        title=Y_AXIS_LABEL,
        range=[scales.y_range[1], scales.y_range[0]],
        tickmode="array",
        tickvals=[scales.y(t) for t in y_ticks],
        ticktext=[format_ascent_time(t) for t in y_ticks],
        showgrid=True,
        gridcolor=GRID_COLOR,
        griddash="dot",
        zeroline=False,
    )
    return fig


def _animation_controls(frame_ms: float) -> list:
    return [
        dict(
            type="buttons",
            showactive=False,
            x=0,
            y=1.08,
            xanchor="left",
            buttons=[
                dict(
                    label="Replay",
                    method="animate",
                    args=[
                        None,
                        dict(
                            frame=dict(duration=frame_ms, redraw=False),
                            transition=dict(duration=0),
                            fromcurrent=False,
                            mode="immediate",
                        ),
                    ],
                )
            ],
        )
    ]


def build_scatter_figure(
    records: Sequence[DomainRecord],
    scales: ChartScales,
    dimensions: ChartDimensions = CHART_DIMENSIONS,
    transition: TransitionConfig = TRANSITION,
    animate: bool = True,
    frame_ms: float = 100.0,
    title: Optional[str] = None,
) -> go.Figure:
    """
    Draw one trace per legend group, with the dots at their final positions.

    With `animate`, the figure also carries sampled entry frames and a
    replay button.
    """
    groups = _group_indices(records)
    final_states = dot_states(records, scales, float("inf"), transition)

    fig = go.Figure()
    for key in LEGEND_ORDER:
        indices = groups[key]
        customdata = [tooltip_lines(records[i]) + (records[i].url,) for i in indices]
        fig.add_trace(
            go.Scatter(
                mode="markers",
                name=LEGEND_LABELS[key],
                customdata=customdata,
                hovertemplate="%{customdata[0]}<br>%{customdata[1]}<extra></extra>",
                **_trace_data(final_states, indices, LEGEND_COLORS[key]),
            )
        )
    fig = _configure_layout(fig, scales, dimensions, title)

    if animate and records:
        frames = []
        for elapsed in frame_times(len(records), transition, frame_ms):
            states = dot_states(records, scales, float(elapsed), transition)
            frames.append(
                go.Frame(
                    name=f"{elapsed:.0f}",
                    data=[go.Scatter(**_trace_data(states, groups[key])) for key in LEGEND_ORDER],
                )
            )
        fig.frames = frames
        fig.update_layout(updatemenus=_animation_controls(frame_ms))
    return fig


def render_plotly(fig: go.Figure) -> None:
    st.plotly_chart(fig, use_container_width=False, config={"displayModeBar": False})
