"""I/O utilities for transparent gzip handling.

Smart file opening that detects gzip compression from magic bytes, so GTF
annotations and matrices can be read whether or not they are compressed.
Open and read failures are raised as the pipeline's own error types.

Example:
    for line in iter_lines(Path("gencode.v46.annotation.gtf.gz")):
        fields = line.split("\t")
"""

import gzip
import io
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from gtf_tpm_combinator.exceptions import FileAccessError, LineReadError

logger = logging.getLogger(__name__)

# Gzip magic bytes (first two bytes of gzip file)
GZIP_MAGIC = b"\x1f\x8b"


def is_gzip_stream(handle: io.BufferedReader) -> bool:
    """Detect gzip compression without consuming any input.

    Peeks at the buffered handle, so the check also works on pipes
    and other non-seekable inputs.

    Args:
        handle: Binary handle opened with buffering

    Returns:
        True if the stream starts with the gzip magic bytes

    Example:
        >>> with open("genes.gtf.gz", "rb") as f:
        ...     is_gzip_stream(f)
        True
    """
    return handle.peek(len(GZIP_MAGIC))[: len(GZIP_MAGIC)] == GZIP_MAGIC


@contextmanager
def smart_open(filepath: Path) -> Iterator[IO[str]]:
    """Open a text file for reading with automatic gzip detection.

    The file is opened exactly once; compression is detected by peeking
    at the buffered binary handle.

    Args:
        filepath: Path to file (may be gzipped, a pipe or /dev/stdin)

    Yields:
        Text file handle

    Raises:
        FileAccessError: If the file cannot be opened
    """
    try:
        raw = open(filepath, "rb")
    except OSError as e:
        raise FileAccessError(f"Cannot open {filepath}: {e.strerror or e}") from e

    try:
        try:
            gzipped = is_gzip_stream(raw)
        except OSError as e:
            raise FileAccessError(f"Cannot read {filepath}: {e.strerror or e}") from e

        if gzipped:
            logger.debug(f"Reading {filepath} as gzip")
            binary: IO[bytes] = gzip.GzipFile(fileobj=raw, mode="rb")
        else:
            binary = raw

        f = io.TextIOWrapper(binary, encoding="utf-8")
        try:
            yield f
        finally:
            f.close()
    finally:
        raw.close()


def iter_lines(filepath: Path) -> Iterator[str]:
    """Iterate over lines in a file with gzip auto-detection.

    Lines are stripped of their trailing newline ("\\n" or "\\r\\n").

    Args:
        filepath: Path to file (may be gzipped)

    Yields:
        Lines from file

    Raises:
        FileAccessError: If the file cannot be opened
        LineReadError: If reading fails part way (I/O, encoding, corrupt gzip)
    """
    with smart_open(filepath) as f:
        line_num = 0
        try:
            for line_num, line in enumerate(f, 1):
                yield line.rstrip("\r\n")
        except (OSError, EOFError, UnicodeDecodeError) as e:
            raise LineReadError(
                f"Error reading {filepath} after line {line_num}: {e}"
            ) from e
