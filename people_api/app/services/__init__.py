"""
Service layer.

Two interchangeable implementations of ``PeopleServiceProtocol`` live
here: ``MemoryPeopleService`` keeps records in a list, ``PeopleService``
stores them in MongoDB through ``PeopleDao``.  API handlers only see the
protocol, so switching storage does not touch them.
"""

from .base import PeopleServiceProtocol  # noqa: F401
from .memory_people_service import MemoryPeopleService  # noqa: F401
from .people_service import PeopleService  # noqa: F401
