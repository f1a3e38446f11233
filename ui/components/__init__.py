"""
This package provides a collection of reusable UI components for the portal.

It is organized into several modules, each containing a specific category of components:
- `base`: CSS injector and small HTML snippets (pills, status line).
- `cards`: Dashboard metric cards and the course accordion.
- `auth_form`: The shared signup/login form.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    pill,
    status_line,
)

from .cards import (
    course_accordion,
    format_timestamp,
    metric_card,
)

from . import auth_form
