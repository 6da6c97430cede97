"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a single router which ``main``
mounts at ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import people

router = APIRouter()

router.include_router(people.router, prefix="/people", tags=["people"])
