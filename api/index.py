"""
Serverless entry point.

Vercel's Python runtime imports this file for every request routed to
``/api/*`` and serves the ASGI object named ``app``; no listener is
bound by the application in this mode (``APP_ENV=production``).
"""

from academy_api.app.main import app  # noqa: F401
