"""
API package containing versioned routes.

A version subpackage such as ``v1`` exposes a top‑level ``router``
including all of its resource endpoints.
"""
