"""
Custom exceptions for PDF Shuffle.

Every failure raised by the assembler is one of four terminal kinds:
invalid source, invalid page range, failed save, or an empty result.
"""


class PDFShuffleException(Exception):
    """Base exception for all PDF Shuffle errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF shuffle error occurred."


class InvalidPDFError(PDFShuffleException):
    """Raised when a source path cannot be opened as a PDF document."""

    @property
    def default_message(self) -> str:
        return "Invalid PDF file."


class InvalidPageRangeError(PDFShuffleException):
    """Raised when a page number, range boundary or chunk size is invalid."""

    @property
    def default_message(self) -> str:
        return "Invalid page range."


class PageSpecError(InvalidPageRangeError):
    """Raised when a textual page specification cannot be parsed."""

    @property
    def default_message(self) -> str:
        return "Invalid page specification."


class SaveFailedError(PDFShuffleException):
    """Raised when an assembled document cannot be written to disk."""

    @property
    def default_message(self) -> str:
        return "Failed to save PDF."


class NoPagesError(PDFShuffleException):
    """Raised when an operation would produce a document without pages."""

    @property
    def default_message(self) -> str:
        return "No pages to process."
