import streamlit as st

from domain.constants import COURSE_CATALOG
from ui.components import course_accordion, format_timestamp, inject_base_css, metric_card, pill


def view(portal):
    session = portal.session
    if session is None:
        # Router guard normally prevents this; render nothing rather than a stale user.
        return
    inject_base_css()

    head_l, head_r = st.columns([4, 1])
    with head_l:
        st.markdown(pill("Dashboard"), unsafe_allow_html=True)
        st.header(f"Hello, {session.name or 'there'} 👋")
        st.write("You are signed in to Deejoft Portal. Explore projects, manage teams, and keep "
                 "track of your workflows from this centralized hub.")
    head_r.button("Sign out", key="sign_out", on_click=portal.sign_out)

    c1, c2, c3 = st.columns(3)
    with c1:
        metric_card("Last login", format_timestamp(session.last_login))
    with c2:
        metric_card("Projects", "Coming soon")
    with c3:
        metric_card("Account email", session.email)

    st.subheader("Deejoft Courses")
    st.write("Explore our current trainings to sharpen your skills across critical IT domains.")
    course_accordion(COURSE_CATALOG, portal.is_expanded, portal.toggle_course)
