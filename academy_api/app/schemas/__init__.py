"""
Pydantic schema definitions for API payloads.

Each domain (players, coaches, match schedule, auth) defines its own
Pydantic models for request and response bodies.  Shared envelopes
live in ``common``.  Schemas are separated from the Supabase tables
to decouple the API representation from persistence.
"""
