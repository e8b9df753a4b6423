"""
Custom exceptions for the combinator pipeline.
Kept minimal - every one of these is fatal for a run.
"""


class CombinatorError(Exception):
    """Base exception for pipeline errors."""
    pass


class FileAccessError(CombinatorError):
    """Raised when an input cannot be opened or the output cannot be created."""
    pass


class LineReadError(CombinatorError):
    """Raised when reading a line fails part way through a file."""
    pass


class EmptyInputError(CombinatorError):
    """Raised when the expression matrix has no header line."""
    pass


class OutputWriteError(CombinatorError):
    """Raised when writing to the output table fails."""
    pass
