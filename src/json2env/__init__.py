"""
json2env - JSON to environment variable converter.

Flattens a JSON document into KEY=VALUE lines for process environments
and .env files.
"""

__version__ = "0.2.0"

from .converter import EnvConverter
from .flattener import Flattener, flatten, stringify
from .formatter import EnvFormatter
from .types import ConversionResult, EnvVar, FlattenConfig, OutputFormat, ValueKind

__all__ = [
    "EnvConverter",
    "Flattener",
    "flatten",
    "stringify",
    "EnvFormatter",
    "ConversionResult",
    "EnvVar",
    "FlattenConfig",
    "OutputFormat",
    "ValueKind",
]
