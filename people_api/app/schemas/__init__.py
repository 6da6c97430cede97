"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the stored documents so the API shape
can change without touching the database layout.
"""
