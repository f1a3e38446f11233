"""
Centralized constants for the portal: storage slot names, view and form
identifiers, status texts and the static course catalog.
"""

# Storage slot suffixes; full keys are "<namespace>-users" / "<namespace>-active-user".
DEFAULT_NAMESPACE = "deejoft-portal"
USERS_SLOT = "users"
ACTIVE_USER_SLOT = "active-user"


def storage_key(namespace: str, slot: str) -> str:
    return f"{namespace}-{slot}"


# Views
VIEW_LANDING = "landing"
VIEW_AUTH = "auth"
VIEW_DASHBOARD = "dashboard"
VIEWS = (VIEW_LANDING, VIEW_AUTH, VIEW_DASHBOARD)

# Auth form modes
MODE_SIGNUP = "signup"
MODE_LOGIN = "login"
FORM_MODES = (MODE_SIGNUP, MODE_LOGIN)

# Form field constraints (mirrors the input attributes of the auth form)
NAME_MIN_LENGTH = 2
PASSWORD_MIN_LENGTH = 8

# Status messages
SIGNUP_SUCCESS_MESSAGE = "Account created. Please sign in with your new credentials."

BRAND_NAME = "Deejoft Portal"

COURSE_CATALOG = [
    {
        "title": "Website Development",
        "description": "Learn modern frontend and backend techniques for building responsive, "
                       "performant websites with real-world tooling.",
    },
    {
        "title": "DevOps",
        "description": "Master CI/CD pipelines, infrastructure as code, and automation practices "
                       "that keep engineering teams shipping quickly.",
    },
    {
        "title": "Cybersecurity",
        "description": "Understand threat modeling, secure coding, and incident response to "
                       "defend applications and infrastructure.",
    },
    {
        "title": "Data Science",
        "description": "Explore data pipelines, analytics, and machine learning workflows that "
                       "unlock insights for modern businesses.",
    },
]

FIRST_COURSE_TITLE = COURSE_CATALOG[0]["title"]
