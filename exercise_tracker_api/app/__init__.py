"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, errors, database),
``schemas`` (public JSON shapes), ``services`` (business logic),
``utils`` (coercion and formatting) and ``api`` (HTTP routes).
"""

from .main import app, create_app  # noqa: F401
