import datetime as dt

import streamlit as st

from domain.constants import BRAND_NAME, MODE_LOGIN, MODE_SIGNUP
from ui.components import auth_form, inject_base_css, status_line

COPY = {
    MODE_SIGNUP: ("Get Started Now", "Create an account and unlock all Deejoft services."),
    MODE_LOGIN: ("Welcome Back", "Enter your credentials to access your Deejoft account."),
}


def view(portal):
    inject_base_css()
    forms = portal.forms
    mode = forms.mode
    heading, blurb = COPY[mode]

    st.caption(BRAND_NAME)
    st.header(heading)
    st.write(blurb)

    submitted = auth_form.render(mode, forms.active_form, forms.revision)
    if submitted is not None:
        portal.submit(submitted)
        st.rerun()

    status = portal.status
    if status:
        st.markdown(status_line(status.kind, status.message), unsafe_allow_html=True)

    if mode == MODE_SIGNUP:
        st.write("Already have an account?")
        st.button("Log in", key="switch_to_login", on_click=portal.switch_mode, args=(MODE_LOGIN,))
    else:
        st.write("New to Deejoft?")
        st.button("Create account", key="switch_to_signup", on_click=portal.switch_mode, args=(MODE_SIGNUP,))

    st.caption(f"© {dt.date.today().year} Deejoft. All rights reserved.")
