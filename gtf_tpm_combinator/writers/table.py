"""Output table writer.

Output format (tab-separated, '#'-prefixed header):
#Chr  start  end  gene_id   sample1
7     100    200  ENSG0001  5.2
"""

from collections.abc import Iterable
from pathlib import Path
from types import TracebackType

from gtf_tpm_combinator.exceptions import FileAccessError, OutputWriteError
from gtf_tpm_combinator.models import EnrichedRow

COORDINATE_COLUMNS = ["Chr", "start", "end"]


def format_header(matrix_header: list[str]) -> str:
    """Build the output header line (without newline)."""
    return "#" + "\t".join(COORDINATE_COLUMNS + matrix_header)


def format_row(row: EnrichedRow) -> str:
    """Build one output data line (without newline)."""
    return "\t".join([row.chromosome, row.start, row.end, *row.columns])


class TableWriter:
    """Writes the coordinate-annotated table.

    Opens the output file on initialization. Implements context manager
    protocol for automatic cleanup.

    Usage:
        with TableWriter(Path("output.tsv")) as writer:
            writer.write_header(header)
            writer.write_rows(rows)
    """

    def __init__(self, output_file: Path) -> None:
        """Initialize writer and open the output file.

        Args:
            output_file: Path of the table to create (overwritten if present)

        Raises:
            FileAccessError: If the file cannot be created
        """
        self.output_file = output_file
        self.row_count = 0

        try:
            self._handle = open(output_file, "w", encoding="utf-8", newline="\n")
        except OSError as e:
            raise FileAccessError(
                f"Cannot create output file {output_file}: {e.strerror or e}"
            ) from e

    def _write_line(self, line: str) -> None:
        try:
            self._handle.write(f"{line}\n")
        except OSError as e:
            raise OutputWriteError(
                f"Error writing to {self.output_file}: {e.strerror or e}"
            ) from e

    def write_header(self, matrix_header: list[str]) -> None:
        """Write the header line.

        Args:
            matrix_header: Original matrix header fields
        """
        self._write_line(format_header(matrix_header))

    def write_row(self, row: EnrichedRow) -> None:
        """Write a single data row."""
        self._write_line(format_row(row))
        self.row_count += 1

    def write_rows(self, rows: Iterable[EnrichedRow]) -> None:
        """Write data rows in the given order."""
        for row in rows:
            self.write_row(row)

    def close(self) -> None:
        """Flush and close the output file."""
        try:
            self._handle.close()
        except OSError as e:
            raise OutputWriteError(
                f"Error closing {self.output_file}: {e.strerror or e}"
            ) from e

    def __enter__(self) -> "TableWriter":
        """Context manager entry."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit - close the output file."""
        self.close()
