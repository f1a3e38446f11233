import streamlit as st
from typing import Any, Dict, Optional

from domain.constants import MODE_SIGNUP, NAME_MIN_LENGTH, PASSWORD_MIN_LENGTH


def render(mode: str, form, revision: int) -> Optional[Dict[str, Any]]:
    """
    Renders the signup or login form seeded from the controller's form values.

    Args:
        mode: "signup" or "login".
        form: The SignupForm / LoginForm holding the current values.
        revision: Controller form revision; part of every widget key so a
            programmatic reset re-seeds the widgets.

    Returns:
        The submitted field values, or None if the form was not submitted.
    """
    key_prefix = f"{mode}_{revision}"
    signup = mode == MODE_SIGNUP
    with st.form(f"form_{key_prefix}", clear_on_submit=False):
        values: Dict[str, Any] = {}
        if signup:
            values['name'] = st.text_input(
                "Name", value=form.name, key=f"{key_prefix}_name", placeholder="Jane Doe",
                help=f"At least {NAME_MIN_LENGTH} characters.")
        values['email'] = st.text_input(
            "Email address", value=form.email, key=f"{key_prefix}_email", placeholder="name@deejoft.com")
        values['password'] = st.text_input(
            "Password", value=form.password, key=f"{key_prefix}_password", type="password",
            placeholder=f"Minimum {PASSWORD_MIN_LENGTH} characters")
        if signup:
            values['terms'] = st.checkbox(
                "I agree to the Terms & Privacy", value=form.terms, key=f"{key_prefix}_terms")
        else:
            values['remember'] = st.checkbox(
                "Remember me", value=form.remember, key=f"{key_prefix}_remember")

        submitted = st.form_submit_button(
            "Create account" if signup else "Log in", type="primary", use_container_width=True)

    return values if submitted else None
