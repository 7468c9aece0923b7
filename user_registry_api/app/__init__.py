"""
Application package initializer.

The API is split into ``core`` (configuration, logging, database,
exceptions), ``schemas`` (request and response models), ``services``
(store operations) and ``api`` (HTTP routes).
"""

from .main import app  # noqa: F401
