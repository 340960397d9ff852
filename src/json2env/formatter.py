"""Rendering of flattened entries as output lines."""

import logging
from typing import Iterable, Iterator, List, Optional
from .types import EnvVar, OutputFormat, ValueKind


class EnvFormatter:
    """
    Formatter rendering EnvVar entries one per line, in entry order.

    ENV lines are ``KEY=VALUE`` with the value written verbatim. DOTENV lines
    double-quote string values and escape backslashes, quotes and newlines.
    """

    LINE_SEPARATOR = "\n"

    def __init__(self, output_format: OutputFormat = OutputFormat.ENV,
                 logger: Optional[logging.Logger] = None):
        self.output_format = output_format
        self.logger = logger or logging.getLogger(__name__)

    def format(self, entries: Iterable[EnvVar]) -> str:
        """Render all entries, lines joined without a trailing newline."""
        return self.LINE_SEPARATOR.join(self.iter_lines(entries))

    def iter_lines(self, entries: Iterable[EnvVar]) -> Iterator[str]:
        """Yield one rendered line per entry, skipping entries without a key."""
        for entry in entries:
            if not entry.key:
                self.logger.warning(
                    f"Skipping value '{entry.value}' without a key (the JSON root is a scalar)"
                )
                continue
            yield self.format_line(entry)

    def format_line(self, entry: EnvVar) -> str:
        if self.output_format is OutputFormat.DOTENV:
            return f"{entry.key}={self._dotenv_value(entry)}"
        return f"{entry.key}={entry.value}"

    @staticmethod
    def _dotenv_value(entry: EnvVar) -> str:
        if entry.kind is ValueKind.STRING:
            escaped = (
                entry.value
                .replace("\\", "\\\\")
                .replace('"', '\\"')
                .replace("\n", "\\n")
            )
            return f'"{escaped}"'
        return entry.value


def format_entries(entries: List[EnvVar], output_format: OutputFormat = OutputFormat.ENV) -> str:
    return EnvFormatter(output_format).format(entries)
