"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, database gateway and
error types), ``schemas`` (pydantic payloads), ``services`` (business
logic), ``api`` (versioned JSON routes) and ``web`` (the HTML page).
"""

from .main import app  # noqa: F401
