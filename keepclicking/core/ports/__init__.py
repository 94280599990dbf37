# keepclicking - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from keepclicking.core.ports.preferences import (
    PreferenceStoragePort,
    StorageError,
    StorageUnavailableError,
)

__all__ = [
    # Preferences
    "PreferenceStoragePort",
    "StorageError",
    "StorageUnavailableError",
]
