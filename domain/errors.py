"""Exception hierarchy for the portal.

Signup and login errors carry the user-facing status text as their message so
the form controller can surface them unchanged.
"""


class PortalError(Exception):
    """Base class for all portal errors."""


class MalformedStorageError(PortalError):
    """Persisted payload could not be decoded. Never surfaced to the user."""


class SignupError(PortalError):
    pass


class TermsNotAcceptedError(SignupError):
    def __init__(self, message: str = "You need to accept the terms to create an account."):
        super().__init__(message)


class InvalidFieldError(SignupError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class DuplicateEmailError(SignupError):
    def __init__(self, email: str = "",
                 message: str = "An account with this email already exists. Try signing in."):
        super().__init__(message)
        self.email = email


class InvalidCredentialsError(PortalError):
    # Same message for unknown email and wrong password.
    def __init__(self, message: str = "Incorrect email or password. Try again."):
        super().__init__(message)
