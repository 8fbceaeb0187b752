"""
Application package initializer.

The records of the adoption platform (users, shelters, pets and
adoption applications) are handled by one service per entity in
``services``, exposed through the routers in ``api/v1/endpoints`` and
persisted by the keyed tables in ``core.store``.
"""

from .main import app  # noqa: F401
