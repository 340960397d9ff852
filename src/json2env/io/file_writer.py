"""Output writing to a file or standard output."""

import logging
import sys
from pathlib import Path
from typing import Optional, Union
from ..types import ConversionError, ErrorType


class FileWriter:
    """
    Writes rendered lines to a file path or to standard output.

    A final newline is appended to non-empty text. Missing parent
    directories are an error, they are not created.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the file writer.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def write(self, text: str, path: Optional[Union[str, Path]] = None) -> int:
        """
        Write output text.

        Args:
            text: Rendered lines
            path: Destination file; None or "-" writes standard output

        Returns:
            Number of characters written

        Raises:
            ConversionError: If the destination cannot be written
        """
        payload = f"{text}\n" if text else ""

        if path is None or str(path) == "-":
            try:
                sys.stdout.write(payload)
                sys.stdout.flush()
            except OSError as e:
                raise ConversionError(
                    f"Could not write to standard output: {e}",
                    ErrorType.OUTPUT,
                    context={"path": "-"}
                )
            return len(payload)

        output_path = Path(path)
        try:
            with open(output_path, "w", encoding="utf-8", newline="\n") as f:
                f.write(payload)
        except OSError as e:
            raise ConversionError(
                f"Could not write output file {output_path}: {e}",
                ErrorType.OUTPUT,
                context={"path": str(output_path)}
            )

        self.logger.info(f"Wrote {len(payload)} characters to {output_path}")
        return len(payload)
