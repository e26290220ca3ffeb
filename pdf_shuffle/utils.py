"""Utility helpers shared by the assembler and the CLI."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple

from .backends.base import PDFBackend
from .document import SourceDocument
from .exceptions import PDFShuffleException, SaveFailedError
from .types import PathLike, PDFInfo

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def to_path(path: PathLike) -> Path:
    """Normalize an input path to an absolute :class:`Path`."""
    return Path(path).expanduser().resolve()


def ensure_output_directory(directory: PathLike) -> Path:
    """Create ``directory`` if needed and return it as an absolute path."""
    path = to_path(directory)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SaveFailedError(
            f"Cannot create output directory: {directory}. Error: {exc}"
        ) from exc

    if not path.is_dir():
        raise SaveFailedError(f"Output location is not a directory: {directory}")
    return path


def get_pdf_info(pdf_path: PathLike, *, backend: Optional[PDFBackend] = None) -> PDFInfo:
    """Return a :class:`PDFInfo` summary of ``pdf_path``."""

    return SourceDocument(pdf_path, backend=backend).to_pdf_info()


def validate_pdf(pdf_path: PathLike, *, backend: Optional[PDFBackend] = None) -> Tuple[bool, str]:
    """Check that ``pdf_path`` can be opened, without raising."""

    path = Path(pdf_path)
    if not path.exists():
        return False, f"File not found: {pdf_path}"

    if not path.is_file():
        return False, f"Path is not a file: {pdf_path}"

    if not os.access(path, os.R_OK):
        return False, f"Cannot read file (permission denied): {pdf_path}"

    try:
        SourceDocument(path, backend=backend)
    except PDFShuffleException as exc:
        return False, str(exc)
    return True, ""


def format_file_size(size_bytes: float) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
