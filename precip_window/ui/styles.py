import streamlit as st
from .. import config

def apply_custom_css():
    """Injects the dashboard CSS: highlight banners and the precipitation calendar grid."""
    c = config.THEME_COLORS
    st.markdown(f"""
    <style>
        html, body, [class*="css"] {{
            font-family: sans-serif;
            color: {c["text_main"]};
        }}

        .stApp {{
            background-color: {c["background"]};
        }}

        div[data-testid="stMetric"] {{
            background: #ffffff;
            padding: 16px;
            border-radius: 8px;
            border: 1px solid #e1e4e8;
        }}

        .info-box {{
            border-left: 6px solid {c["primary"]};
            margin: 1em 0;
            padding: 0.5em 1em;
            border-radius: 4px;
        }}

        /* Calendar */
        .calendar-table {{ width: 100%; border-collapse: collapse; table-layout: fixed; }}
        .calendar-table th, .calendar-table td {{
            border: 1px solid #ddd; text-align: center; vertical-align: top;
            height: 56px; padding: 4px; font-size: 12px;
        }}
        .calendar-table .weekend-sun .day {{ color: {c["sunday"]}; }}
        .calendar-table .weekend-sat .day {{ color: {c["saturday"]}; }}
        .calendar-table .base-date {{ outline: 2px solid {c["primary"]}; }}
        .calendar-table .other-month {{ background: #f4f4f4; }}
        .calendar-table .no-data {{ color: #bbb; }}
        .calendar-table .day {{ font-weight: 700; }}
    </style>
    """, unsafe_allow_html=True)
