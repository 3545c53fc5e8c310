"""
Application package initializer.

The package is organised in layers: ``core`` holds the record store,
identifier generation, configuration and logging; ``schemas`` the
record and input types; ``services`` the queries and mutations per
collection; and ``api`` the versioned HTTP routes.
"""

from .main import app  # noqa: F401
