"""Flattening of JSON value trees into environment variable entries."""

import logging
from typing import Any, Dict, List, Optional
from .types import EnvVar, FlattenConfig, ValueKind


def stringify(value: Any) -> str:
    """
    Render a scalar JSON value as an environment variable value.

    Null becomes the empty string, booleans are lowercase, integers keep no
    fractional part and floats use the shortest repr that round-trips.
    Strings are returned as-is.
    """
    kind = ValueKind.of(value)

    if kind is ValueKind.NULL:
        return ""
    if kind is ValueKind.BOOLEAN:
        return "true" if value else "false"
    if kind is ValueKind.NUMBER:
        return repr(value) if isinstance(value, float) else str(value)
    if kind is ValueKind.STRING:
        return value
    raise TypeError(f"Cannot stringify {kind.value} value")


class Flattener:
    """
    Flattener turning a JSON value tree into ordered EnvVar entries.

    Object keys are composed with the configured key separator. Arrays are
    either joined into a single value or, when enumeration is enabled,
    expanded like objects keyed by their indices.
    """

    def __init__(self, config: Optional[FlattenConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the flattener.

        Args:
            config: Flatten settings (defaults: "__", ",", no enumeration)
            logger: Optional logger instance
        """
        self.config = config or FlattenConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.collisions: List[str] = []
        self._entries: Dict[str, EnvVar] = {}

    def flatten(self, value: Any) -> List[EnvVar]:
        """
        Flatten a value tree.

        Args:
            value: Decoded JSON value

        Returns:
            Entries in first-emission order, keys unique
        """
        self._entries = {}
        self.collisions = []

        self._flatten_value("", value)

        entries = list(self._entries.values())
        self.logger.debug(f"Flattened into {len(entries)} entries ({len(self.collisions)} collisions)")
        return entries

    def build_key(self, prefix: str, key: str) -> str:
        """Append a key segment to a prefix."""
        if not prefix:
            return key
        return f"{prefix}{self.config.key_separator}{key}"

    def join_array(self, items: List[Any]) -> str:
        """
        Join array elements into one value, flattening nested collections in place.

        Nested arrays and objects are spliced into the surrounding join; an
        empty nested collection contributes one empty field.
        """
        fields = []
        stack = list(reversed(items))

        while stack:
            item = stack.pop()
            kind = ValueKind.of(item)

            if kind.is_scalar:
                fields.append(stringify(item))
                continue

            children = list(item.values()) if kind is ValueKind.OBJECT else item
            if children:
                stack.extend(reversed(children))
            else:
                fields.append("")

        return self.config.array_separator.join(fields)

    def _flatten_value(self, prefix: str, value: Any) -> None:
        # Explicit stack, children pushed in reverse to keep document order
        stack = [(prefix, value)]

        while stack:
            key, node = stack.pop()
            kind = ValueKind.of(node)

            if kind is ValueKind.OBJECT:
                children = [(self.build_key(key, name), child) for name, child in node.items()]
                stack.extend(reversed(children))
            elif kind is ValueKind.ARRAY and self.config.enumerate_array:
                children = [(self.build_key(key, str(index)), item) for index, item in enumerate(node)]
                stack.extend(reversed(children))
            elif kind is ValueKind.ARRAY:
                self._emit(key, self.join_array(node), ValueKind.STRING)
            else:
                self._emit(key, stringify(node), kind)

    def _emit(self, key: str, value: str, kind: ValueKind) -> None:
        # Last write wins; the entry keeps its first position
        if key in self._entries:
            self.collisions.append(key)
            self.logger.warning(f"Duplicate key '{key}': previous value overwritten")

        self._entries[key] = EnvVar(key=key, value=value, kind=kind)


def flatten(value: Any, config: Optional[FlattenConfig] = None) -> List[EnvVar]:
    """Flatten a value tree with a throwaway Flattener."""
    return Flattener(config).flatten(value)
