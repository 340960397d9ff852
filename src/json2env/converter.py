"""Main conversion pipeline: parse, flatten, format."""

import logging
from pathlib import Path
from typing import Optional, Union
from .types import (
    ConversionError,
    ConversionResult,
    ErrorType,
    FlattenConfig,
    OutputFormat
)
from .parser import JSONParser
from .flattener import Flattener
from .formatter import EnvFormatter
from .io import FileReader, FileWriter
from .error_handler import ErrorHandler
from .profiler import PerformanceProfiler


class EnvConverter:
    """
    Converts a JSON document into environment variable lines.

    Wires the parser, flattener and formatter together for one
    configuration, and optionally reads and writes files or standard streams.
    """

    def __init__(self, config: Optional[FlattenConfig] = None,
                 output_format: OutputFormat = OutputFormat.ENV,
                 strict: bool = False,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the converter.

        Args:
            config: Flatten settings, defaults to FlattenConfig()
            output_format: Line format of the output
            strict: Fail instead of overwriting when flattened keys collide
            logger: Optional logger instance
        """
        self.config = config or FlattenConfig()
        self.output_format = output_format
        self.strict = strict
        self.logger = logger or logging.getLogger(__name__)

        self.error_handler = ErrorHandler(self.logger)
        self.parser = JSONParser(self.error_handler, self.logger)
        self.flattener = Flattener(self.config, self.logger)
        self.formatter = EnvFormatter(self.output_format, self.logger)
        self.reader = FileReader(self.logger)
        self.writer = FileWriter(self.logger)
        self.profiler = PerformanceProfiler(self.logger)

    def convert(self, json_string: str) -> ConversionResult:
        """
        Convert JSON text into rendered lines.

        Args:
            json_string: JSON document

        Returns:
            ConversionResult; on failure ``success`` is False and ``errors``
            holds the messages
        """
        input_size = len(json_string.encode("utf-8"))

        with self.profiler.profile_operation("json2env", input_size):
            try:
                data = self.parser.parse(json_string)
            except ValueError as e:
                self.logger.debug(f"Parse failed: {e}")
                return ConversionResult(success=False, output="", errors=[str(e)])

            self.logger.debug(f"Structure: {self.parser.get_structure_statistics(data)}")

            entries = self.flattener.flatten(data)
            collisions = list(self.flattener.collisions)

            broken_keys = [entry.key for entry in entries if "\n" in entry.key or "\r" in entry.key]
            if broken_keys:
                error = ConversionError(
                    f"Flattened keys contain line breaks: {', '.join(repr(key) for key in broken_keys)}",
                    ErrorType.INVALID_KEY,
                    context={"keys": broken_keys}
                )
                return ConversionResult(
                    success=False,
                    output="",
                    entries=entries,
                    collisions=collisions,
                    errors=[self.error_handler.handle_error(error)]
                )

            if collisions and self.strict:
                error = ConversionError(
                    f"Flattened keys collide: {', '.join(sorted(set(collisions)))}",
                    ErrorType.COLLISION,
                    context={"keys": collisions}
                )
                return ConversionResult(
                    success=False,
                    output="",
                    entries=entries,
                    collisions=collisions,
                    errors=[self.error_handler.handle_error(error)]
                )

            output = self.formatter.format(entries)
            self.profiler.stop_profiling(
                output_size=len(output.encode("utf-8")),
                entries_emitted=len(entries)
            )

        return ConversionResult(
            success=True,
            output=output,
            entries=entries,
            collisions=collisions
        )

    def convert_file(self, input_path: Optional[Union[str, Path]] = None,
                     output_path: Optional[Union[str, Path]] = None) -> ConversionResult:
        """
        Read JSON from a file or stdin, convert it and write the result.

        Args:
            input_path: Input file, None for standard input
            output_path: Output file, None for standard output

        Returns:
            ConversionResult of the conversion; nothing is written on failure

        Raises:
            ConversionError: If reading or writing fails
        """
        json_string = self.reader.read(input_path)

        result = self.convert(json_string)
        if result.success:
            self.writer.write(result.output, output_path)

        return result
