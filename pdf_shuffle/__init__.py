"""
PDF Shuffle - split, merge, extract and reorder PDF pages.

Quick Start:
    >>> from pdf_shuffle import DocumentAssembler, parse_page_spec
    >>> assembler = DocumentAssembler()
    >>> pages = parse_page_spec("3, 1, 5-7")
    >>> assembler.extract_specific_pages("input.pdf", "selected.pdf", pages)

Operations:
    - split_by_range: one file with an inclusive page range
    - split_every_n: consecutive chunks of N pages
    - split_into_single_pages: one file per page
    - extract_specific_pages: pages in the given order, repeats allowed
    - reorder_pages: the document's pages in a new order
    - merge_pdfs: all pages of several documents, one after another

Exceptions:
    - PDFShuffleException: Base exception
    - InvalidPDFError: Source could not be opened as a PDF
    - InvalidPageRangeError: Page number, range or chunk size is invalid
    - PageSpecError: Page specification text could not be parsed
    - SaveFailedError: Result could not be written
    - NoPagesError: Result would have no pages

For CLI usage, use the 'pdf-shuffle' command after installation.
"""

# Core classes and operations
from pdf_shuffle.assembler import (
    DocumentAssembler,
    copy_selected_pages,
    extract_specific_pages,
    identity_order,
    merge_pdfs,
    reorder_pages,
    reversed_order,
    split_by_range,
    split_every_n,
    split_into_single_pages,
)
from pdf_shuffle.document import SourceDocument
from pdf_shuffle.page_spec import format_page_list, parse_page_spec

# Data types
from pdf_shuffle.types import PDFInfo

# Exceptions
from pdf_shuffle.exceptions import (
    PDFShuffleException,
    InvalidPDFError,
    InvalidPageRangeError,
    PageSpecError,
    SaveFailedError,
    NoPagesError,
)

# Utility functions
from pdf_shuffle.utils import get_pdf_info, validate_pdf, format_file_size

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Main classes
    "DocumentAssembler",
    "SourceDocument",
    # Operations
    "split_by_range",
    "split_every_n",
    "split_into_single_pages",
    "extract_specific_pages",
    "reorder_pages",
    "merge_pdfs",
    "copy_selected_pages",
    "identity_order",
    "reversed_order",
    # Page specifications
    "parse_page_spec",
    "format_page_list",
    # Data types
    "PDFInfo",
    # Exceptions
    "PDFShuffleException",
    "InvalidPDFError",
    "InvalidPageRangeError",
    "PageSpecError",
    "SaveFailedError",
    "NoPagesError",
    # Utility functions
    "get_pdf_info",
    "validate_pdf",
    "format_file_size",
    # Version info
    "__version__",
]
