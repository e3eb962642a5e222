"""
Top-level package for the Football Academy API.

All functionality lives in submodules under ``app``; importing
``academy_api.app`` exposes the ASGI application as ``app``.
"""

__all__ = []
