"""Validation utilities for JSON input and separator settings."""

import json
import math
from typing import Any, List, Tuple
from ..types import ValidationResult, ValidationError, ErrorType


def reject_constant(token: str) -> Any:
    """`parse_constant` hook refusing the non-standard NaN/Infinity tokens."""
    raise ValueError(f"Invalid JSON token: {token}")


def parse_finite_float(token: str) -> float:
    """`parse_float` hook refusing numbers outside the float range."""
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"Number out of range: {token}")
    return value


def decode_json(json_string: str) -> Any:
    """Decode strict JSON: no NaN/Infinity tokens, no out-of-range numbers."""
    return json.loads(json_string, parse_constant=reject_constant, parse_float=parse_finite_float)


class ValidationUtils:
    """Utility class for validating input text and configuration values."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON input is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = decode_json(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        max_depth = ValidationUtils._calculate_max_depth(data)
        if max_depth > 20:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). Keys may get very long.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings,
            data=data
        )

    @staticmethod
    def validate_separator(separator: str, name: str, allow_empty: bool = True) -> ValidationResult:
        """
        Validate a key or array separator.

        Args:
            separator: Separator string to check
            name: Option name used in messages
            allow_empty: Whether the empty string is acceptable

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not separator and not allow_empty:
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message=f"{name} cannot be empty",
                location=name
            ))

        if "\n" in separator or "\r" in separator:
            errors.append(ValidationError(
                type=ErrorType.CONFIG,
                message=f"{name} cannot contain newline characters",
                location=name
            ))

        if "=" in separator:
            warnings.append(f"{name} contains '=', output lines will be ambiguous")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def _calculate_max_depth(data: Any) -> int:
        """Calculate maximum nesting depth without recursing."""
        max_depth = 0
        stack = [(data, 0)]

        while stack:
            node, depth = stack.pop()
            max_depth = max(max_depth, depth)

            if isinstance(node, dict):
                stack.extend((child, depth + 1) for child in node.values())
            elif isinstance(node, list):
                stack.extend((child, depth + 1) for child in node)

        return max_depth

    @staticmethod
    def summarize(result: ValidationResult) -> Tuple[List[str], List[str]]:
        """Render a ValidationResult into error messages and warnings."""
        messages = []
        for error in result.errors:
            if error.location and error.location not in ("input", "root"):
                messages.append(f"{error.message} ({error.location})")
            else:
                messages.append(error.message)
        return messages, list(result.warnings)
