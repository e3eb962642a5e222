"""
Application package initializer.

``core`` holds configuration, logging, errors, the Supabase record
store and token verification; ``services`` holds per-resource logic;
``api`` holds the HTTP routers.  The assembled application is
re-exported here as ``app``.
"""

from .main import app  # noqa: F401
