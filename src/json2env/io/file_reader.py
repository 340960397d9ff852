"""Input reading from a file or standard input."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
from ..types import ConversionError, ErrorType


STDIN_MARKER = "-"


class FileReader:
    """Reads the whole JSON document from a file path or from standard input."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file reader.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def read(self, path: Optional[Union[str, Path]] = None) -> str:
        """
        Read input text.

        Args:
            path: File to read; None or "-" reads standard input

        Returns:
            The input text

        Raises:
            ConversionError: If the source cannot be read or decoded
        """
        if path is None or str(path) == STDIN_MARKER:
            return self._read_stdin()

        input_path = Path(path)
        try:
            # utf-8-sig tolerates a leading byte order mark
            text = input_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionError(
                f"Could not read input file {input_path}: {e}",
                ErrorType.INPUT,
                context={"path": str(input_path)}
            )

        self.logger.debug(f"Read {len(text)} characters from {input_path}")
        return text

    def _read_stdin(self) -> str:
        try:
            text = sys.stdin.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionError(
                f"Could not read standard input: {e}",
                ErrorType.INPUT,
                context={"path": STDIN_MARKER}
            )

        self.logger.debug(f"Read {len(text)} characters from standard input")
        return text
