"""Infrastructure layer for Pointlist.

Everything that touches the file system lives here; the domain layer
stays pure.
"""

from pointlist.infrastructure.storage import JsonStorage, SeedRepository

__all__ = ["JsonStorage", "SeedRepository"]
