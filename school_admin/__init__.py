# /school_admin/__init__.py

"""Async admin console for the school records REST backend."""

__version__ = "1.0.0"
