"""
Template Method Kata.

A DataProcessor running one validate -> transform -> store pipeline
for several payload formats, with the format-specific step supplied
by a DataTransformer.
"""

from katas.templatemethod.processor import DataProcessor
from katas.templatemethod.storage import DataStorage
from katas.templatemethod.transformers import (
    DEFAULT_FAILURE_MARKER,
    CsvTransformer,
    DataTransformer,
    JsonTransformer,
    get_transformer,
)

__all__ = [
    "DataProcessor",
    "DataStorage",
    "DataTransformer",
    "CsvTransformer",
    "JsonTransformer",
    "get_transformer",
    "DEFAULT_FAILURE_MARKER",
]
