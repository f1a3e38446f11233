import html
from typing import Optional

import streamlit as st

PRIMARY_ACCENT = "#2563EB"  # blue-600
GREEN = "#059669"  # emerald-600
RED = "#DC2626"  # red-600
CARD_BG = "#f7f8fa"
CHIP_BG = "#e0e7ff"


def inject_base_css():
    # Streamlit drops elements a rerun does not emit again; call once per page render.
    st.markdown(
        f"""
        <style>
        .portal-pill {{
            display:inline-block; padding:2px 10px; border-radius:999px;
            font-size:12px; font-weight:600; background:{CHIP_BG}; color:{PRIMARY_ACCENT};
        }}
        .form-status {{padding:8px 12px; border-radius:8px; font-size:14px; margin-top:8px;}}
        .form-status-success {{background:#ecfdf5; color:{GREEN}; border:1px solid #a7f3d0;}}
        .form-status-error {{background:#fef2f2; color:{RED}; border:1px solid #fecaca;}}
        .metric-card {{background:{CARD_BG}; border-radius:12px; padding:12px 16px;}}
        .metric-title {{font-size:12px; color:#6b7280;}}
        .metric-value {{font-size:16px; font-weight:700; word-break:break-all;}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def pill(text: str) -> str:
    return f'<span class="portal-pill">{html.escape(text)}</span>'


def status_line(kind: Optional[str], message: str) -> str:
    cls = "success" if kind == "success" else "error"
    return f'<p class="form-status form-status-{cls}">{html.escape(message)}</p>'
