"""
Shared data models for the katas.
"""

from katas.models.base import (
    DataFormat,
    OrderMessage,
    ProcessingStatus,
    StorageResult,
)

__all__ = [
    "DataFormat",
    "OrderMessage",
    "ProcessingStatus",
    "StorageResult",
]
