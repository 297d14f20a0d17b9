"""Mockable infrastructure components.

Production subclasses are imported here so `__subclasses__()` sees them
as soon as the component base is imported.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
