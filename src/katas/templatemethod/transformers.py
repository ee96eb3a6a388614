"""
Format-specific payload transformers.

DataTransformer.transform is the template: it rejects payloads
carrying the failure marker, then hands off to the _convert hook
that each format implements.
"""

from abc import ABC, abstractmethod

from katas.models.base import DataFormat

DEFAULT_FAILURE_MARKER = "invalid"


class DataTransformer(ABC):
    """Abstract base class for payload transformers.

    Subclasses must implement:
        - _convert: Rewrite a payload that passed the failure check

    Attributes:
        data_format: Format this transformer handles
        failure_marker: Substring that makes a payload untransformable
    """

    data_format: DataFormat

    def __init__(self, failure_marker: str = DEFAULT_FAILURE_MARKER) -> None:
        """Initialize the transformer.

        Args:
            failure_marker: Substring that makes transform() fail

        Raises:
            ValueError: If failure_marker is not a non-blank string
        """
        if not isinstance(failure_marker, str) or not failure_marker.strip():
            raise ValueError("Failure marker must be a non-empty string.")
        self._failure_marker = failure_marker

    @property
    def failure_marker(self) -> str:
        """Get the failure marker."""
        return self._failure_marker

    def transform(self, data: str) -> str | None:
        """Transform a payload.

        Args:
            data: Non-empty payload

        Returns:
            Transformed payload, or None if the payload cannot be transformed
        """
        if self._failure_marker in data:
            return None
        return self._convert(data)

    @abstractmethod
    def _convert(self, data: str) -> str:
        """Rewrite a payload. Called only for transformable input."""
        pass


class CsvTransformer(DataTransformer):
    """Rewrites CSV payloads to use semicolon separators."""

    data_format = DataFormat.CSV

    def _convert(self, data: str) -> str:
        return data.replace(",", ";")


class JsonTransformer(DataTransformer):
    """Rewrites JSON payloads to use single quotes."""

    data_format = DataFormat.JSON

    def _convert(self, data: str) -> str:
        return data.replace('"', "'")


_TRANSFORMERS: dict[DataFormat, type[DataTransformer]] = {
    DataFormat.CSV: CsvTransformer,
    DataFormat.JSON: JsonTransformer,
}


def get_transformer(
    data_format: DataFormat | str,
    failure_marker: str = DEFAULT_FAILURE_MARKER,
) -> DataTransformer:
    """Create the transformer for a payload format.

    Args:
        data_format: Payload format (enum or its string value)
        failure_marker: Substring that makes transform() fail

    Returns:
        Transformer for the format

    Raises:
        ValueError: If the format is not supported
    """
    fmt = DataFormat(data_format)
    return _TRANSFORMERS[fmt](failure_marker)
