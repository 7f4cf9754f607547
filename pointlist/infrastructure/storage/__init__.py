"""Storage infrastructure for Pointlist.

File access for seed files and the config file, using Result values
for explicit error handling.
"""

from pointlist.infrastructure.storage.json_storage import JsonStorage
from pointlist.infrastructure.storage.seed import SeedRepository

__all__ = [
    "JsonStorage",
    "SeedRepository",
]
