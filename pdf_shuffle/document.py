"""Read-only source documents opened through a pluggable backend."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from .backends import BackendDocument, PypdfBackend
from .backends.base import PDFBackend
from .types import PathLike, PDFInfo


class SourceDocument:
    """An opened PDF whose pages can be copied into new documents.

    The document is never modified. Its lifetime is bounded by the
    operation that opened it.
    """

    def __init__(
        self,
        pdf_path: PathLike,
        *,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.path = Path(pdf_path)
        self.backend: PDFBackend = backend or PypdfBackend()
        self._document: BackendDocument = self.backend.load(str(pdf_path))

    @property
    def document(self) -> BackendDocument:
        return self._document

    @property
    def page_count(self) -> int:
        return self._document.page_count

    @property
    def file_size(self) -> int:
        return self._document.file_size

    @property
    def metadata(self) -> Dict[str, str]:
        return self._document.metadata()

    def page(self, index: int) -> Optional[Any]:
        """Return the page at zero-based ``index`` or ``None`` when out of range."""
        if index < 0 or index >= self.page_count:
            return None
        return self._document.get_page(index)

    def iter_pages(self) -> Iterable[Any]:
        return self._document.iter_pages()

    def to_pdf_info(self) -> PDFInfo:
        metadata = self.metadata
        return PDFInfo(
            num_pages=self.page_count,
            file_size=self.file_size,
            title=metadata.get("/Title") or None,
            author=metadata.get("/Author") or None,
        )


__all__ = ["SourceDocument"]
