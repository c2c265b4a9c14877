"""
Abstract base class for per-user key-value property storage.

The host spreadsheet persists a flat string-to-string map for each user. The
settings store only needs get/set/delete on that map, so any backend that can
provide them (the host's property service, a JSON file, memory) fits.
"""
from abc import ABC, abstractmethod
from typing import Optional


class PropertyStore(ABC):
    """
    Abstract base class for property storage scoped to the current user.

    Values are plain strings; callers encode structured values (e.g. JSON lists)
    themselves. Writes are last-writer-wins, there is no transactional
    read-modify-write.
    """

    @abstractmethod
    def get_property(self, key: str) -> Optional[str]:
        """
        Read a property.

        Args:
            key: Property name

        Returns:
            Stored string, or None if the property was never set
        """
        pass

    @abstractmethod
    def set_property(self, key: str, value: str) -> None:
        """
        Write a property, replacing any previous value.

        Args:
            key: Property name
            value: String value to store
        """
        pass

    @abstractmethod
    def delete_property(self, key: str) -> None:
        """Remove a property. Deleting a missing key is not an error."""
        pass
