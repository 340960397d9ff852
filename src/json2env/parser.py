"""JSON parser with validation and structure statistics."""

import logging
from typing import Any, Dict, Optional
from .types import ValueKind
from .error_handler import ErrorHandler
from .utils.validation import ValidationUtils


class JSONParser:
    """
    JSON parser decoding through the input validator.

    Produces the plain Python value tree (dict, list, str, int, float, bool,
    None) consumed by the flattener. Object key order is preserved.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Any:
        """
        Parse a JSON document.

        Args:
            json_string: JSON text to parse

        Returns:
            Decoded value tree

        Raises:
            ValueError: If the text is empty or not valid JSON
        """
        validation_result = self.error_handler.validate_input(json_string)
        if not validation_result.is_valid:
            error_messages, _ = ValidationUtils.summarize(validation_result)
            raise ValueError(f"Invalid JSON input: {'; '.join(error_messages)}")

        data = validation_result.data

        self.logger.debug(f"Parsed JSON with root type: {ValueKind.of(data).value}")
        return data

    def get_structure_statistics(self, data: Any) -> Dict[str, Any]:
        """
        Get statistics about the value tree.

        Args:
            data: Parsed data to analyze

        Returns:
            Dictionary with object, array and scalar counts and the max depth
        """
        stats = {
            "root_kind": ValueKind.of(data).value,
            "max_depth": 0,
            "object_count": 0,
            "array_count": 0,
            "scalar_count": 0,
            "total_keys": 0,
            "total_items": 0,
        }

        stack = [(data, 0)]
        while stack:
            node, depth = stack.pop()
            stats["max_depth"] = max(stats["max_depth"], depth)

            if isinstance(node, dict):
                stats["object_count"] += 1
                stats["total_keys"] += len(node)
                stack.extend((value, depth + 1) for value in node.values())

            elif isinstance(node, list):
                stats["array_count"] += 1
                stats["total_items"] += len(node)
                stack.extend((item, depth + 1) for item in node)

            else:
                stats["scalar_count"] += 1

        return stats
