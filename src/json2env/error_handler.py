"""Error handling implementation for json2env."""

import logging
from typing import Optional
from .types import (
    ValidationResult,
    ValidationError,
    ConversionError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler:
    """
    Error handler for json2env operations.

    Validates input text and settings before any flattening happens, and
    turns conversion errors into the messages reported to the user.
    """

    HINTS = {
        ErrorType.INPUT: "Check that the input file exists and is readable.",
        ErrorType.SYNTAX: "The input must be a single valid JSON document.",
        ErrorType.OUTPUT: "Check that the output directory exists and is writable.",
        ErrorType.CONFIG: "Check the separator options.",
        ErrorType.COLLISION: "Rename the conflicting keys or choose a different key separator.",
        ErrorType.INVALID_KEY: "Object keys must not contain line breaks.",
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            result = ValidationUtils.validate_json_string(input_data)
        except RecursionError as e:
            self.logger.debug(f"Input nesting too deep to decode: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.SYNTAX,
                    message="JSON input is nested too deeply",
                    location="input"
                )],
                warnings=[]
            )

        for warning in result.warnings:
            self.logger.debug(warning)
        return result

    def validate_config(self, key_separator: str, array_separator: str) -> ValidationResult:
        """
        Validate separator settings.

        Args:
            key_separator: Separator between nested key segments
            array_separator: Separator between joined array elements

        Returns:
            ValidationResult combining both checks
        """
        key_result = ValidationUtils.validate_separator(key_separator, "key_separator", allow_empty=False)
        array_result = ValidationUtils.validate_separator(array_separator, "array_separator")

        errors = key_result.errors + array_result.errors
        warnings = key_result.warnings + array_result.warnings
        for warning in warnings:
            self.logger.warning(warning)

        return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)

    def handle_error(self, error: ConversionError) -> str:
        """
        Log a conversion error and build the message shown to the user.

        Args:
            error: ConversionError to handle

        Returns:
            Message with a hint matching the error type
        """
        self.logger.debug(f"Conversion error: {error.error_type.value} - {error} (context: {error.context})")

        hint = self.HINTS.get(error.error_type)
        if hint:
            return f"{error}. {hint}"
        return str(error)
