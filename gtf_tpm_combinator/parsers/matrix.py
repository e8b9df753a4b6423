"""Expression matrix parser.

Streams rows from a tab-separated expression (TPM) matrix in a single pass,
so the matrix may also come from a pipe. Supports gzipped files.

Matrix format (tab-separated, header line, gene_id in the first column):
gene_id   sample1  sample2
ENSG0001  5.2      0.0
"""

from collections.abc import Iterator
from pathlib import Path

from gtf_tpm_combinator.exceptions import EmptyInputError
from gtf_tpm_combinator.io_utils import iter_lines


def _data_rows(lines: Iterator[str]) -> Iterator[list[str]]:
    """Split non-blank lines into fields."""
    for line in lines:
        if not line.strip():
            continue
        yield line.split("\t")


def read_matrix(filepath: Path) -> tuple[list[str], Iterator[list[str]]]:
    """Open an expression matrix and read its header.

    The file is opened once: the header is read immediately and the
    returned iterator continues from the following line. Blank
    (whitespace-only) lines are skipped.

    Args:
        filepath: Path to matrix file (may be gzipped or a pipe)

    Returns:
        Tuple of (header fields verbatim, iterator over tab-split data rows)

    Raises:
        FileAccessError: If the file cannot be opened
        LineReadError: If a line cannot be read (raised while iterating
            for data lines)
        EmptyInputError: If the file has no lines

    Example:
        >>> header, rows = read_matrix(Path("tpm.tsv"))
        >>> for fields in rows:
        ...     print(fields[0])
    """
    lines = iter_lines(filepath)
    header = next(lines, None)
    if header is None:
        lines.close()
        raise EmptyInputError(
            f"Expression matrix is empty (no header line): {filepath}"
        )
    return header.split("\t"), _data_rows(lines)
