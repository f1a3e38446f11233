import html
import datetime as _dt
from typing import Any, Dict, Iterable, Optional

import streamlit as st


def format_timestamp(value: Optional[str]) -> str:
    """Render a stored ISO timestamp in local time; 'Just now' when missing."""
    if not value:
        return "Just now"
    try:
        parsed = _dt.datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return value
    return parsed.astimezone().strftime('%Y-%m-%d %H:%M:%S')


def metric_card(title: str, value: Any):
    """Styled by `inject_base_css`, which the calling view emits."""
    st.markdown(
        f"""
        <div class="metric-card">
            <div class="metric-title">{html.escape(title)}</div>
            <div class="metric-value">{html.escape(str(value))}</div>
        </div>
        """,
        unsafe_allow_html=True,
    )


def course_accordion(courses: Iterable[Dict[str, str]], is_open, on_toggle, key_prefix: str = "course"):
    """One toggle button + panel per course.

    `is_open(title)` decides panel visibility; `on_toggle(title)` is used as the
    button callback so the state flips before the next render.
    """
    for course in courses:
        title = course['title']
        open_ = is_open(title)
        slug = title.lower().replace(' ', '-')
        with st.container(border=True):
            st.button(
                f"{'−' if open_ else '+'}  {title}",
                key=f"{key_prefix}_{slug}",
                on_click=on_toggle,
                args=(title,),
                use_container_width=True,
            )
            if open_:
                st.write(course['description'])
