"""
Data Storage Interface.

The storage collaborator receives transformed payloads from the
DataProcessor. Implementations live outside this package.
"""

from abc import ABC, abstractmethod

from katas.models.base import StorageResult


class DataStorage(ABC):
    """Abstract capability provider for persisting transformed data."""

    @abstractmethod
    def store_data(self, data: str) -> StorageResult:
        """Store a transformed payload.

        Args:
            data: Transformed payload

        Returns:
            StorageResult.SUCCESS if stored, StorageResult.FAILURE otherwise
        """
        pass
