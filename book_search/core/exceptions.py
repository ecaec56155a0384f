"""
Custom exception hierarchy for Book Search.

Every error carries a human-readable message and an optional details dict.
Malformed books and fragments are not errors; only structural misuse of the
matcher, unreadable corpora, failed exports and bad configuration are.
"""


class BookSearchError(Exception):
    """Base exception for all Book Search errors."""

    def __init__(self, message: str, details: dict = None):
        """
        Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(BookSearchError):
    """Raised when configuration is invalid or missing."""
    pass


class CorpusError(BookSearchError):
    """Raised when a corpus file cannot be read or parsed into books."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        """
        Initialize corpus error.

        Args:
            message: Error description.
            path: Path to the problematic corpus file.
            details: Additional context.
        """
        super().__init__(message, details)
        self.path = path


class ExtractionError(CorpusError):
    """Raised when text extraction from a scanned PDF fails."""

    def __init__(self, message: str, filepath: str = None, details: dict = None):
        super().__init__(message, path=filepath, details=details)
        self.filepath = filepath


class ExportError(BookSearchError):
    """Raised when a search report cannot be written."""

    def __init__(self, message: str, path: str = None, details: dict = None):
        super().__init__(message, details)
        self.path = path


class SearchError(BookSearchError):
    """Raised when a search cannot be executed."""

    def __init__(self, message: str, query: str = None, details: dict = None):
        """
        Initialize search error.

        Args:
            message: Error description.
            query: The search term in use.
            details: Additional context.
        """
        super().__init__(message, details)
        self.query = query


class InvalidInputError(SearchError, TypeError):
    """Raised when the books argument is not an iterable of book records."""
    pass
