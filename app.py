import streamlit as st
import datetime
import logging
from precip_window import config, ui
from precip_window.api import ApiError, query_panels, query_precipitation
from precip_window.stations import list_stations

logging.basicConfig(level=logging.INFO)

# --- PAGE SETUP ---
st.set_page_config(page_title="降水量モニター", layout="wide", page_icon="🌧️")
ui.apply_custom_css()
ui.render_header()

stations = {s.id: s.display_name for s in list_stations()}
yesterday = datetime.date.today() - datetime.timedelta(days=1)

# --- SIDEBAR ---
st.sidebar.header("🔍 表示設定")
mode = st.sidebar.radio("表示モード", ["単一地点", "比較"], horizontal=True)

if mode == "単一地点":
    selected_date = st.sidebar.date_input("📅 基準日", value=yesterday, max_value=yesterday)
    selected_station = st.sidebar.selectbox(
        "📍 場所",
        options=list(stations),
        index=list(stations).index(config.DEFAULT_STATION_ID),
        format_func=lambda sid: stations[sid],
    )

    try:
        with st.spinner("気象庁のデータを取得中..."):
            payload = query_precipitation(selected_date.isoformat(), selected_station)
    except ApiError as e:
        st.error(e.message)
    else:
        ui.render_summary(payload)

        tab_chart, tab_calendar, tab_data = st.tabs(["📊 グラフ", "🗓️ カレンダー", "💾 データ"])
        with tab_chart:
            ui.render_chart(payload)
        with tab_calendar:
            ui.render_calendar(payload)
        with tab_data:
            st.dataframe(
                {"日付": payload["labels"], "降水量 (mm)": payload["data"]},
                width="stretch",
                hide_index=True,
            )

else:
    n_panels = st.sidebar.slider("パネル数", 2, config.MAX_PANELS, 2)
    panel_requests = []
    for i in range(n_panels):
        st.sidebar.markdown(f"**パネル {i + 1}**")
        d = st.sidebar.date_input("基準日", value=yesterday, max_value=yesterday, key=f"date_{i}")
        sid = st.sidebar.selectbox(
            "場所", options=list(stations), index=i % len(stations),
            format_func=lambda s: stations[s], key=f"station_{i}",
        )
        panel_requests.append((d.isoformat(), sid))

    with st.spinner("気象庁のデータを取得中..."):
        payloads = query_panels(panel_requests)

    cols = st.columns(len(payloads))
    for i, (col, payload) in enumerate(zip(cols, payloads)):
        with col:
            ui.render_panel(payload, key=f"panel_{i}")
