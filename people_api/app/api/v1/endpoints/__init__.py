"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one resource; ``router.py``
aggregates them.
"""
