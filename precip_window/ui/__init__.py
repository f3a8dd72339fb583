from .styles import apply_custom_css
from .components import render_header, render_summary, render_chart, render_calendar, render_panel
