"""Exception hierarchy for the text analysis pipeline.

Every failure is a synchronous contract violation raised to the immediate
caller. The classes also derive from the matching builtin so callers that
only know `ValueError` / `IndexError` keep working.
"""


class TextAnalysisError(Exception):
    """Base text analysis exception."""


class InvalidArgumentError(TextAnalysisError, ValueError):
    """Raised when a required input (source, collection, stream) is missing."""


class OutOfRangeError(TextAnalysisError, ValueError):
    """Raised when a numeric parameter is outside its valid domain.

    Examples: non-positive buffer size, threshold or top-K; a copy range that
    runs past the end of its source.
    """


class IndexOutOfRangeError(OutOfRangeError, IndexError):
    """Raised for a logical index outside [0, size)."""


class EmptyNGramError(InvalidArgumentError, OutOfRangeError):
    """Raised when an n-gram would be built from zero elements."""


class UnsupportedOperationError(TextAnalysisError):
    """Raised for mutations a fixed-capacity window does not support."""


class ConfigError(TextAnalysisError):
    """Raised when a configuration file or command option is invalid."""
