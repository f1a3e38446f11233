import datetime as dt

import streamlit as st

from domain.constants import BRAND_NAME, MODE_LOGIN, MODE_SIGNUP
from ui.components import inject_base_css, pill


def view(portal):
    inject_base_css()
    head_l, head_r = st.columns([4, 1])
    head_l.subheader(BRAND_NAME)
    head_r.button("Sign In", key="landing_sign_in",
                  on_click=portal.navigate_to_auth, args=(MODE_LOGIN,))

    copy, card = st.columns([3, 2])
    with copy:
        st.markdown(pill("Digital Solutions For Modern Teams"), unsafe_allow_html=True)
        st.title("Welcome to your Deejoft workspace")
        st.write("Manage projects, track progress, and access guided learning, all in one "
                 "portal designed to keep your business moving forward.")
        c1, c2 = st.columns(2)
        c1.button("Get Started", key="landing_get_started", type="primary",
                  on_click=portal.navigate_to_auth, args=(MODE_SIGNUP,))
        c2.button("I already have an account", key="landing_have_account",
                  on_click=portal.navigate_to_auth, args=(MODE_LOGIN,))
    with card:
        with st.container(border=True):
            st.markdown("#### What you get")
            st.markdown("- Secure sign-in and account tools\n"
                        "- Course catalog tailored for IT teams\n"
                        "- Fast navigation to client projects")

    st.caption(f"© {dt.date.today().year} Deejoft. All rights reserved.")
