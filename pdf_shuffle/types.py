"""
Type definitions and dataclasses for PDF Shuffle.
"""

import os
from dataclasses import dataclass
from typing import Optional, Union

PathLike = Union[str, os.PathLike]


@dataclass
class PDFInfo:
    """
    Summary of a source document, shown to users before they pick pages.

    Attributes:
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        title: PDF title metadata
        author: PDF author metadata
    """
    num_pages: int
    file_size: int
    title: Optional[str] = None
    author: Optional[str] = None
