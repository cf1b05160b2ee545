"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Storage lives in ``core.db``, business logic for users
and audit log entries in ``services`` and the HTTP surface in
``api/v1/endpoints``.  Versioning is handled by grouping routers under
the ``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
