"""
Application package initializer.

The API is split into ``core`` (settings, logging, storage), ``schemas``
(request and acknowledgement models), ``services`` (storage calls per
collection) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
