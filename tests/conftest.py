from __future__ import annotations

from pathlib import Path
from typing import Callable, List
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


def _width_for(page_number: int) -> int:
    # Fixture pages encode their 1-based number in the page width.
    return 100 + page_number


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(filename: str, num_pages: int, *, title: str | None = None) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for page_number in range(1, num_pages + 1):
            writer.add_blank_page(width=_width_for(page_number), height=200)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def page_numbers() -> Callable[[str | Path], List[int]]:
    """Return the original page numbers contained in a written PDF."""

    def _read(pdf_path: str | Path) -> List[int]:
        reader = PdfReader(str(pdf_path))
        return [int(page.mediabox.width) - 100 for page in reader.pages]

    return _read


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", 10, title="Sample")


@pytest.fixture()
def empty_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("empty.pdf", 0)


@pytest.fixture()
def broken_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "broken.pdf"
    path.write_bytes(b"this is not a pdf")
    return path
