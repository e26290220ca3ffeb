"""pypdf backend implementation for PDF Shuffle."""

from __future__ import annotations

import io
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..exceptions import InvalidPDFError, SaveFailedError
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger("pdf_shuffle.backends.pypdf")


@dataclass
class PypdfDocument(BackendDocument):
    reader: PdfReader

    def iter_pages(self) -> Iterable[object]:
        return iter(self.reader.pages)

    def get_page(self, index: int) -> object:
        return self.reader.pages[index]

    def metadata(self) -> Dict[str, str]:
        metadata = self.reader.metadata
        if not metadata:
            return {}
        return {
            str(key): str(value)
            for key, value in metadata.items()
            if value is not None
        }


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise InvalidPDFError(f"PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise InvalidPDFError(f"Unable to read PDF file: {pdf_path}. Error: {exc}") from exc

        try:
            reader = PdfReader(io.BytesIO(raw_bytes))
            if reader.is_encrypted:
                LOGGER.debug("Attempting to open encrypted PDF %s with an empty password", pdf_path)
                if reader.decrypt("") == 0:
                    raise InvalidPDFError(f"PDF is encrypted and cannot be opened: {pdf_path}")
            page_count = len(reader.pages)
        except InvalidPDFError:
            raise
        except PdfReadError as exc:
            raise InvalidPDFError(f"Corrupted or invalid PDF file: {pdf_path}. Error: {exc}") from exc
        except Exception as exc:
            raise InvalidPDFError(f"Unexpected error reading PDF: {pdf_path}. Error: {exc}") from exc

        LOGGER.debug("Opened %s (%d pages)", pdf_path, page_count)
        return PypdfDocument(page_count=page_count, file_size=len(raw_bytes), reader=reader)

    def new_writer(self) -> PdfWriter:
        return PdfWriter()

    def append_page(self, writer: PdfWriter, page: object) -> None:
        writer.add_page(page)

    def write(self, writer: PdfWriter, destination: str) -> None:
        path = Path(destination)

        buffer = io.BytesIO()
        try:
            writer.write(buffer)
        except Exception as exc:
            raise SaveFailedError(f"Unable to serialize PDF for {destination}. Error: {exc}") from exc

        temp_path = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile("wb", delete=False, dir=path.parent, suffix=".tmp") as handle:
                temp_path = Path(handle.name)
                handle.write(buffer.getvalue())
            os.chmod(temp_path, 0o644)
            os.replace(temp_path, path)
        except OSError as exc:
            if temp_path is not None:
                temp_path.unlink(missing_ok=True)
            raise SaveFailedError(f"Failed to save PDF to {destination}. Error: {exc}") from exc
