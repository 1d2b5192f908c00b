"""
Movies API Application Package.

This package contains the HTTP layer, request validation, origin policy,
in-memory movie store, and shared utilities.
"""

__version__ = "1.0.0"
