"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules: ``core`` (configuration, logging, the in-memory store and
shared dependencies), ``schemas`` (pydantic models), ``services``
(business logic) and ``api`` (versioned routers).
"""

from .main import app  # noqa: F401
