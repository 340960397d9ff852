"""Core type definitions for json2env."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ValueKind(Enum):
    """Enumeration of JSON value kinds."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"

    @classmethod
    def of(cls, value: Any) -> "ValueKind":
        """
        Classify a decoded JSON value.

        Args:
            value: Value produced by the JSON decoder

        Returns:
            ValueKind of the value

        Raises:
            TypeError: If the value is not a JSON value
        """
        if value is None:
            return cls.NULL
        # bool is a subclass of int, so it must be checked first
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, (int, float)):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        if isinstance(value, list):
            return cls.ARRAY
        if isinstance(value, dict):
            return cls.OBJECT
        raise TypeError(f"Not a JSON value: {type(value).__name__}")

    @property
    def is_scalar(self) -> bool:
        return self not in (ValueKind.ARRAY, ValueKind.OBJECT)


class OutputFormat(Enum):
    """Enumeration of output line formats."""
    ENV = "env"
    DOTENV = "dotenv"


class ErrorType(Enum):
    """Enumeration of error types."""
    INPUT = "input"
    SYNTAX = "syntax"
    OUTPUT = "output"
    CONFIG = "config"
    COLLISION = "collision"
    INVALID_KEY = "invalid_key"


@dataclass(frozen=True)
class FlattenConfig:
    """Settings for one flattening run."""
    key_separator: str = "__"
    array_separator: str = ","
    enumerate_array: bool = False

    def __post_init__(self):
        """Validate separators after initialization."""
        if not self.key_separator:
            raise ValueError("key_separator cannot be empty")

        for name in ("key_separator", "array_separator"):
            if "\n" in getattr(self, name) or "\r" in getattr(self, name):
                raise ValueError(f"{name} cannot contain newline characters")


@dataclass(frozen=True)
class EnvVar:
    """A flattened entry: the key, its string value and the kind it came from."""
    key: str
    value: str
    kind: ValueKind = ValueKind.STRING

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


@dataclass
class ValidationError:
    """Validation error details."""
    type: ErrorType
    message: str
    location: Optional[str] = None


@dataclass
class ValidationResult:
    """Result of input validation."""
    is_valid: bool
    errors: List[ValidationError]
    warnings: List[str]
    data: Any = None


@dataclass
class ConversionResult:
    """Result of a JSON to environment conversion."""
    success: bool
    output: str
    entries: List[EnvVar] = field(default_factory=list)
    collisions: List[str] = field(default_factory=list)
    errors: Optional[List[str]] = None


class ConversionError(Exception):
    """Custom exception for conversion errors."""

    def __init__(self, message: str, error_type: ErrorType, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context
