import calendar
from datetime import date, timedelta
from typing import Dict

import altair as alt
import pandas as pd
import streamlit as st

from .. import config
from ..data.processing import classify
from ..models import HighlightState, format_label

_WEEKDAYS = ["日", "月", "火", "水", "木", "金", "土"]


def render_header():
    st.title("🌧️ 降水量モニター")
    st.caption("気象庁 過去の気象データ（日別値）より、基準日までの30日間の降水量を表示します。")


def render_summary(payload: Dict):
    """Location, base date and the two rolling totals, framed by the highlight colour."""
    state = classify(payload["total_3_days"], payload["total_30_days"])
    color = config.HIGHLIGHT_COLORS[state.value]

    st.markdown(f"""
    <div class="info-box" style="background-color:{color};">
        <h3 style="margin:0;">場所: {payload['location']}</h3>
        <p style="margin:0;">基準日: <strong>{payload['base_date']}</strong></p>
    </div>""", unsafe_allow_html=True)

    c1, c2 = st.columns(2)
    c1.metric("3日間の合計雨量", f"{payload['total_3_days']:.1f} mm")
    c2.metric("30日間の合計雨量", f"{payload['total_30_days']:.1f} mm")
    if state is not HighlightState.NONE:
        st.warning(config.HIGHLIGHT_LABELS[state.value])


def render_chart(payload: Dict, key: str = "main"):
    """Bar chart of the 30 daily values, oldest on the left."""
    df = pd.DataFrame({"日付": payload["labels"], "降水量 (mm)": payload["data"]})
    chart = alt.Chart(df).mark_bar(color=config.THEME_COLORS["primary"], opacity=0.7).encode(
        x=alt.X("日付:N", sort=None, title="日付"),
        y=alt.Y("降水量 (mm):Q", title="降水量 (mm)", scale=alt.Scale(zero=True)),
        tooltip=["日付", "降水量 (mm)"],
    ).properties(height=300)
    st.altair_chart(chart, width="stretch", key=f"chart_{key}")


def _month_calendar_html(year: int, month: int, values: Dict[str, float], base_date: str) -> str:
    rows = []
    for week in calendar.Calendar(firstweekday=6).monthdatescalendar(year, month):
        cells = []
        for d in week:
            if d.month != month:
                cells.append('<td class="other-month"></td>')
                continue
            cls = []
            if d.weekday() == 6: cls.append("weekend-sun")
            if d.weekday() == 5: cls.append("weekend-sat")
            if d.isoformat() == base_date: cls.append("base-date")
            label = format_label(d)
            if label in values:
                precip = f'<div class="precipitation">{values[label]:.1f} mm</div>'
            else:
                precip = '<div class="precipitation no-data">-</div>'
            cells.append(f'<td class="{" ".join(cls)}"><div class="day">{d.day}</div>{precip}</td>')
        rows.append("<tr>" + "".join(cells) + "</tr>")

    head = "".join(f"<th>{w}</th>" for w in _WEEKDAYS)
    return (f'<h4>{year}年 {month}月</h4><table class="calendar-table">'
            f'<thead><tr>{head}</tr></thead><tbody>{"".join(rows)}</tbody></table>')


def render_calendar(payload: Dict):
    """Base month and the month before it, with each day's value where the window covers it."""
    # Labels carry no year; restricting to these two months keeps them unambiguous
    values = dict(zip(payload["labels"], payload["data"]))
    base = date.fromisoformat(payload["base_date"])
    prev = base.replace(day=1) - timedelta(days=1)

    c1, c2 = st.columns(2)
    c1.markdown(_month_calendar_html(prev.year, prev.month, values, payload["base_date"]), unsafe_allow_html=True)
    c2.markdown(_month_calendar_html(base.year, base.month, values, payload["base_date"]), unsafe_allow_html=True)


def render_panel(payload: Dict, key: str):
    """Compact block for the comparison view."""
    if "error" in payload:
        st.error(payload["error"])
        return
    render_summary(payload)
    render_chart(payload, key=key)
