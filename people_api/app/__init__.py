"""
Application package initializer.

The API is organised in layers: ``api`` holds the versioned routers,
``services`` the business rules, ``dao`` the raw MongoDB access,
``schemas`` the request and response models and ``core`` the
configuration, logging, database and error plumbing.
"""

from .main import app  # noqa: F401
