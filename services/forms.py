"""Auth form controller: signup/login form state, mode selector and status line.

Signup validation order matters: terms first, then field constraints, then
the duplicate-email check against the registry.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from domain.constants import (
    FIRST_COURSE_TITLE, FORM_MODES, MODE_LOGIN, MODE_SIGNUP,
    NAME_MIN_LENGTH, PASSWORD_MIN_LENGTH, SIGNUP_SUCCESS_MESSAGE,
)
from domain.errors import (
    InvalidCredentialsError, InvalidFieldError, SignupError, TermsNotAcceptedError,
)
from domain.models import Account, Session
from services.accounts import AccountRegistry, normalize_email
from services.panels import ExpandedPanels
from services.router import ViewRouter
from services.session import SessionManager

logger = logging.getLogger(__name__)

STATUS_SUCCESS = "success"
STATUS_ERROR = "error"
_BOOL_FIELDS = {"terms", "remember"}


@dataclass
class SignupForm:
    name: str = ""
    email: str = ""
    password: str = ""
    terms: bool = False


@dataclass
class LoginForm:
    email: str = ""
    password: str = ""
    remember: bool = False


@dataclass
class StatusMessage:
    kind: str  # success | error
    message: str


@dataclass
class SignupResult:
    account: Optional[Account] = None
    error: Optional[SignupError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class LoginResult:
    session: Optional[Session] = None
    error: Optional[InvalidCredentialsError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class FormState:
    signup: SignupForm = field(default_factory=SignupForm)
    login: LoginForm = field(default_factory=LoginForm)

    def form(self, mode: str):
        if mode == MODE_SIGNUP:
            return self.signup
        if mode == MODE_LOGIN:
            return self.login
        raise ValueError(f"Unknown form mode: {mode}")


def validate_signup_fields(form: SignupForm):
    if len(form.name.strip()) < NAME_MIN_LENGTH:
        raise InvalidFieldError("name", f"Please enter a name of at least {NAME_MIN_LENGTH} characters.")
    email = normalize_email(form.email)
    local, _, domain = email.partition("@")
    if not local or not domain:
        raise InvalidFieldError("email", "Please enter a valid email address.")
    if len(form.password) < PASSWORD_MIN_LENGTH:
        raise InvalidFieldError("password", f"Password must be at least {PASSWORD_MIN_LENGTH} characters.")


class AuthFormController:
    def __init__(self, registry: AccountRegistry, sessions: SessionManager,
                 router: ViewRouter, panels: ExpandedPanels, mode: str = MODE_SIGNUP):
        self.registry = registry
        self.sessions = sessions
        self.router = router
        self.panels = panels
        self.forms = FormState()
        self.mode = mode
        self.status: Optional[StatusMessage] = None
        # Bumped whenever forms are reset so widgets re-seed from these values.
        self.revision = 0

    @property
    def active_form(self):
        return self.forms.form(self.mode)

    def set_field(self, mode: str, field_name: str, value: Any):
        form = self.forms.form(mode)
        if field_name not in {f.name for f in fields(form)}:
            raise ValueError(f"Unknown {mode} field: {field_name}")
        if field_name in _BOOL_FIELDS:
            value = bool(value)
        elif value is None:
            value = ""
        setattr(form, field_name, value)

    def _apply(self, mode: str, values: Optional[Dict[str, Any]]):
        for name, value in (values or {}).items():
            self.set_field(mode, name, value)

    def clear_status(self):
        self.status = None

    def switch_mode(self, next_mode: str):
        if next_mode not in FORM_MODES:
            raise ValueError(f"Unknown form mode: {next_mode}")
        self.mode = next_mode
        self.status = None

    def submit(self, values: Optional[Dict[str, Any]] = None):
        if self.mode == MODE_SIGNUP:
            return self.submit_signup(values)
        return self.submit_login(values)

    def submit_signup(self, values: Optional[Dict[str, Any]] = None) -> SignupResult:
        self._apply(MODE_SIGNUP, values)
        form = self.forms.signup
        try:
            if not form.terms:
                raise TermsNotAcceptedError()
            validate_signup_fields(form)
            account = self.registry.register(form.name, form.email, form.password)
        except SignupError as exc:
            logger.info("Signup rejected: %s", type(exc).__name__)
            self.status = StatusMessage(STATUS_ERROR, str(exc))
            return SignupResult(error=exc)

        self.forms = FormState(login=LoginForm(email=account.email))
        self.revision += 1
        self.mode = MODE_LOGIN
        self.status = StatusMessage(STATUS_SUCCESS, SIGNUP_SUCCESS_MESSAGE)
        return SignupResult(account=account)

    def submit_login(self, values: Optional[Dict[str, Any]] = None) -> LoginResult:
        self._apply(MODE_LOGIN, values)
        form = self.forms.login
        try:
            session = self.sessions.authenticate(form.email, form.password)
        except InvalidCredentialsError as exc:
            # Form values, password included, are left as typed.
            self.status = StatusMessage(STATUS_ERROR, str(exc))
            return LoginResult(error=exc)

        self.status = None
        self.router.to_dashboard(session)
        self.panels.reset([FIRST_COURSE_TITLE])
        return LoginResult(session=session)

    def reset_after_sign_out(self, email: str = ""):
        self.forms = FormState(login=LoginForm(email=email or ""))
        self.revision += 1
        self.mode = MODE_LOGIN
        self.status = None
