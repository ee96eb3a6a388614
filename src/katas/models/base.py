"""
Base enumerations shared by the katas.

These enums provide type-safe values for the outcomes returned by
the processors and their collaborators.
"""

from enum import Enum


class OrderMessage(str, Enum):
    """Human-readable outcome of processing an order."""

    INVALID_PAYMENT = "Invalid payment method."
    OUT_OF_STOCK = "One or more items are out of stock."
    INVALID_SHIPPING_ADDRESS = "Invalid shipping address."
    SUCCESS = "Order processed successfully."


class ProcessingStatus(str, Enum):
    """Result status from the data processor.

    Each failure value names the first pipeline stage that failed.
    """

    VALIDATION_FAILED = "validation_failed"
    TRANSFORMATION_FAILED = "transformation_failed"
    STORAGE_FAILED = "storage_failed"
    SUCCESS = "success"


class StorageResult(str, Enum):
    """Result returned by a DataStorage collaborator."""

    SUCCESS = "success"
    FAILURE = "failure"


class DataFormat(str, Enum):
    """Payload formats the data processor understands."""

    CSV = "csv"
    JSON = "json"
