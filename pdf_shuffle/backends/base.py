"""Backend protocol for the PDF operations the assembler relies on."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Protocol


@dataclass
class BackendDocument:
    """Represents a loaded, read-only PDF document."""

    page_count: int
    file_size: int

    def iter_pages(self) -> Iterable[object]:
        raise NotImplementedError

    def get_page(self, index: int) -> object:
        raise NotImplementedError

    def metadata(self) -> Dict[str, str]:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining the document capability used by the assembler.

    Any PDF library that can open a file, hand out pages by zero-based
    index, append pages to a fresh document and serialize that document
    can be plugged in.
    """

    def load(self, pdf_path: str) -> BackendDocument:
        """Open ``pdf_path`` or raise :class:`InvalidPDFError`."""

    def new_writer(self) -> object:
        """Return a new, empty output document."""

    def append_page(self, writer: object, page: object) -> None:
        """Append ``page`` at the end of ``writer``."""

    def write(self, writer: object, destination: str) -> None:
        """Persist ``writer`` to ``destination`` or raise :class:`SaveFailedError`."""
