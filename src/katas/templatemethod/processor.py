"""
Data processing pipeline.

Every payload goes through the same three stages:
1. Validation - reject missing or empty input
2. Transformation - apply the format-specific rewrite
3. Storage - hand the result to the DataStorage collaborator

Only the transformation stage differs between formats.
"""

import logging

from katas.models.base import DataFormat, ProcessingStatus, StorageResult
from katas.templatemethod.storage import DataStorage
from katas.templatemethod.transformers import (
    DEFAULT_FAILURE_MARKER,
    CsvTransformer,
    DataTransformer,
    JsonTransformer,
    get_transformer,
)

logger = logging.getLogger(__name__)


class DataProcessor:
    """Validates, transforms and stores CSV and JSON payloads.

    The processor keeps no state between calls, and the storage
    collaborator is called at most once per call.

    Usage:
        processor = DataProcessor(storage)
        status = processor.process_csv_data("name,age,location")
    """

    def __init__(
        self,
        data_storage: DataStorage,
        failure_marker: str = DEFAULT_FAILURE_MARKER,
    ) -> None:
        """Initialize the processor.

        Args:
            data_storage: Collaborator that receives transformed payloads
            failure_marker: Substring that makes a payload untransformable

        Raises:
            ValueError: If data_storage is None or failure_marker is blank
        """
        if data_storage is None:
            raise ValueError("DataStorage cannot be null.")
        self._data_storage = data_storage
        self._failure_marker = failure_marker
        self._csv = CsvTransformer(failure_marker)
        self._json = JsonTransformer(failure_marker)

    @property
    def data_storage(self) -> DataStorage:
        """Get the storage collaborator."""
        return self._data_storage

    @property
    def failure_marker(self) -> str:
        """Get the substring that makes a payload untransformable."""
        return self._failure_marker

    def process_csv_data(self, data: str | None) -> ProcessingStatus:
        """Process a CSV payload (commas become semicolons)."""
        return self._process(data, self._csv)

    def process_json_data(self, data: str | None) -> ProcessingStatus:
        """Process a JSON payload (double quotes become single quotes)."""
        return self._process(data, self._json)

    def process_data(
        self,
        data: str | None,
        data_format: DataFormat | str,
    ) -> ProcessingStatus:
        """Process a payload in the given format.

        Args:
            data: Raw payload
            data_format: Payload format (enum or its string value)

        Returns:
            Processing status

        Raises:
            ValueError: If the format is not supported
        """
        transformer = get_transformer(data_format, self._failure_marker)
        return self._process(data, transformer)

    def _process(
        self,
        data: str | None,
        transformer: DataTransformer,
    ) -> ProcessingStatus:
        """Run the validate -> transform -> store pipeline.

        Args:
            data: Raw payload
            transformer: Format-specific transformation step

        Returns:
            Status of the first failing stage, or SUCCESS
        """
        fmt = transformer.data_format.value

        if not data:
            logger.info(f"{fmt} payload rejected: missing or empty")
            return ProcessingStatus.VALIDATION_FAILED

        transformed = transformer.transform(data)
        if transformed is None:
            logger.info(f"{fmt} payload could not be transformed")
            return ProcessingStatus.TRANSFORMATION_FAILED
        logger.debug(f"{fmt} payload transformed: {len(transformed)} chars")

        result = self._data_storage.store_data(transformed)
        if result == StorageResult.SUCCESS:
            logger.debug(f"{fmt} payload stored")
            return ProcessingStatus.SUCCESS

        logger.info(f"{fmt} payload storage failed")
        return ProcessingStatus.STORAGE_FAILED
