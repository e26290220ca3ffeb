"""Page assembly operations built around :class:`SourceDocument`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .document import SourceDocument
from .exceptions import (
    InvalidPageRangeError,
    NoPagesError,
    PDFShuffleException,
    SaveFailedError,
)
from .page_spec import PageList
from .types import PathLike
from .utils import ensure_output_directory, to_path

LOGGER = logging.getLogger("pdf_shuffle.assembler")

PART_FILENAME_TEMPLATE = "{stem}_part{number}.pdf"
PAGE_FILENAME_TEMPLATE = "{stem}_page{number}.pdf"


def validate_selection(selection: Sequence[int], page_count: int) -> None:
    """Ensure every 1-based page number in ``selection`` exists."""

    for page_num in selection:
        if page_num < 1 or page_num > page_count:
            raise InvalidPageRangeError(
                f"Page {page_num} is out of bounds. PDF has {page_count} pages."
            )


def copy_selected_pages(
    source: SourceDocument,
    selection: Sequence[int],
    backend: Optional[PDFBackend] = None,
) -> Any:
    """Build a new document holding the pages of ``selection`` in order.

    The whole selection is validated before the first page is copied, so an
    out-of-range number never yields a partially assembled document.
    Repeated numbers produce repeated pages.
    """

    validate_selection(selection, source.page_count)

    backend = backend or source.backend
    writer = backend.new_writer()
    for page_num in selection:
        backend.append_page(writer, source.page(page_num - 1))
    return writer


def identity_order(page_count: int) -> PageList:
    """Return the original page order ``[1, ..., page_count]``."""
    return list(range(1, page_count + 1))


def reversed_order(page_count: int) -> PageList:
    """Return the page order with the last page first."""
    return list(range(page_count, 0, -1))


class DocumentAssembler:
    """Split, extract, reorder and merge PDF pages.

    Every operation opens its sources afresh, assembles the result in
    memory and only then writes it. Multi-file splits write their parts one
    by one; when a later part fails, parts already written stay on disk.
    """

    def __init__(self, *, backend: Optional[PDFBackend] = None) -> None:
        self.backend: PDFBackend = backend or PypdfBackend()

    def open(self, pdf_path: PathLike) -> SourceDocument:
        return SourceDocument(pdf_path, backend=self.backend)

    def _write(self, writer: Any, destination: Path) -> str:
        try:
            self.backend.write(writer, str(destination))
        except SaveFailedError as exc:
            LOGGER.error("Failed to write %s: %s", destination, exc)
            raise
        except PDFShuffleException:
            raise
        except Exception as exc:
            LOGGER.error("Failed to write %s: %s", destination, exc)
            raise SaveFailedError(
                f"Unexpected error writing file: {destination}. Error: {exc}"
            ) from exc

        LOGGER.info("Wrote %s", destination)
        return str(destination)

    def _assemble(self, source: SourceDocument, selection: PageList, output_path: PathLike) -> str:
        writer = copy_selected_pages(source, selection, self.backend)
        if not selection:
            raise NoPagesError("The resulting document would have no pages.")
        return self._write(writer, to_path(output_path))

    def _split_in_chunks(
        self,
        input_path: PathLike,
        output_dir: PathLike,
        pages_per_file: int,
        filename_template: str,
    ) -> List[str]:
        source = self.open(input_path)
        if pages_per_file < 1:
            raise InvalidPageRangeError(
                f"Pages per file must be >= 1, got {pages_per_file}"
            )

        directory = ensure_output_directory(output_dir)
        stem = Path(input_path).stem

        created_files: List[str] = []
        starts = range(1, source.page_count + 1, pages_per_file)
        for part_number, start_page in enumerate(starts, start=1):
            end_page = min(start_page + pages_per_file - 1, source.page_count)
            LOGGER.debug("Assembling part %d (pages %d-%d)", part_number, start_page, end_page)
            writer = copy_selected_pages(
                source, range(start_page, end_page + 1), self.backend
            )
            destination = directory / filename_template.format(stem=stem, number=part_number)
            created_files.append(self._write(writer, destination))

        return created_files

    def split_by_range(
        self,
        input_path: PathLike,
        output_path: PathLike,
        start_page: int,
        end_page: int,
    ) -> str:
        """Write pages ``start_page`` through ``end_page`` (inclusive) to one file."""

        source = self.open(input_path)
        if start_page < 1 or end_page > source.page_count or start_page > end_page:
            raise InvalidPageRangeError(
                f"Invalid page range: {start_page}-{end_page}. PDF has {source.page_count} pages."
            )

        writer = copy_selected_pages(
            source, range(start_page, end_page + 1), self.backend
        )
        return self._write(writer, to_path(output_path))

    def split_every_n(
        self,
        input_path: PathLike,
        output_dir: PathLike,
        pages_per_file: int,
    ) -> List[str]:
        """Split into consecutive chunks of ``pages_per_file`` pages.

        Files are named ``<stem>_part<N>.pdf`` with N counting from 1; the
        last chunk may be shorter. Returns the written paths in chunk order.
        """

        return self._split_in_chunks(
            input_path, output_dir, pages_per_file, PART_FILENAME_TEMPLATE
        )

    def split_into_single_pages(
        self,
        input_path: PathLike,
        output_dir: PathLike,
    ) -> List[str]:
        """Write every page to its own ``<stem>_page<N>.pdf`` file."""

        return self._split_in_chunks(input_path, output_dir, 1, PAGE_FILENAME_TEMPLATE)

    def extract_specific_pages(
        self,
        input_path: PathLike,
        output_path: PathLike,
        page_numbers: Iterable[int],
    ) -> str:
        """Copy ``page_numbers`` into a new file, keeping their order and repeats."""

        source = self.open(input_path)
        return self._assemble(source, list(page_numbers), output_path)

    def reorder_pages(
        self,
        input_path: PathLike,
        output_path: PathLike,
        order: Iterable[int],
        *,
        require_permutation: bool = False,
    ) -> str:
        """Write the pages of ``input_path`` in ``order``.

        By default any sequence of in-range page numbers is accepted, so
        this behaves exactly like :meth:`extract_specific_pages`. With
        ``require_permutation`` the order must name every page exactly once.
        """

        source = self.open(input_path)
        selection = list(order)
        if require_permutation and selection:
            validate_selection(selection, source.page_count)
            if sorted(selection) != identity_order(source.page_count):
                raise InvalidPageRangeError(
                    f"Page order must list each of the {source.page_count} pages exactly once."
                )
        return self._assemble(source, selection, output_path)

    def merge_pdfs(self, inputs: Iterable[PathLike], output_path: PathLike) -> str:
        """Concatenate all pages of ``inputs``, in order, into one file.

        The first input that cannot be opened aborts the merge before
        anything is written.
        """

        pdf_paths = list(inputs)
        if not pdf_paths:
            raise NoPagesError("No input PDFs provided")

        writer = self.backend.new_writer()
        total_pages = 0
        for pdf_path in pdf_paths:
            LOGGER.debug("Processing input PDF %s", pdf_path)
            source = self.open(pdf_path)
            for page in source.iter_pages():
                self.backend.append_page(writer, page)
                total_pages += 1

        if total_pages == 0:
            raise NoPagesError("All input PDFs are empty.")

        LOGGER.debug("Merged %d pages from %d PDFs", total_pages, len(pdf_paths))
        return self._write(writer, to_path(output_path))


def split_by_range(
    input_path: PathLike,
    output_path: PathLike,
    start_page: int,
    end_page: int,
    *,
    backend: Optional[PDFBackend] = None,
) -> str:
    return DocumentAssembler(backend=backend).split_by_range(
        input_path, output_path, start_page, end_page
    )


def split_every_n(
    input_path: PathLike,
    output_dir: PathLike,
    pages_per_file: int,
    *,
    backend: Optional[PDFBackend] = None,
) -> List[str]:
    return DocumentAssembler(backend=backend).split_every_n(
        input_path, output_dir, pages_per_file
    )


def split_into_single_pages(
    input_path: PathLike,
    output_dir: PathLike,
    *,
    backend: Optional[PDFBackend] = None,
) -> List[str]:
    return DocumentAssembler(backend=backend).split_into_single_pages(input_path, output_dir)


def extract_specific_pages(
    input_path: PathLike,
    output_path: PathLike,
    page_numbers: Iterable[int],
    *,
    backend: Optional[PDFBackend] = None,
) -> str:
    return DocumentAssembler(backend=backend).extract_specific_pages(
        input_path, output_path, page_numbers
    )


def reorder_pages(
    input_path: PathLike,
    output_path: PathLike,
    order: Iterable[int],
    *,
    require_permutation: bool = False,
    backend: Optional[PDFBackend] = None,
) -> str:
    return DocumentAssembler(backend=backend).reorder_pages(
        input_path, output_path, order, require_permutation=require_permutation
    )


def merge_pdfs(
    inputs: Iterable[PathLike],
    output_path: PathLike,
    *,
    backend: Optional[PDFBackend] = None,
) -> str:
    return DocumentAssembler(backend=backend).merge_pdfs(inputs, output_path)


__all__ = [
    "DocumentAssembler",
    "PART_FILENAME_TEMPLATE",
    "PAGE_FILENAME_TEMPLATE",
    "copy_selected_pages",
    "validate_selection",
    "identity_order",
    "reversed_order",
    "split_by_range",
    "split_every_n",
    "split_into_single_pages",
    "extract_specific_pages",
    "reorder_pages",
    "merge_pdfs",
]
