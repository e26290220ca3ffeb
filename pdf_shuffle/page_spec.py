"""Parsing of user supplied page specifications such as ``"1, 3, 5-10"``."""

from __future__ import annotations

import re
from typing import Iterable, List

from .exceptions import PageSpecError

PageList = List[int]

_NUMBER_RE = re.compile(r"\d+", re.ASCII)


def _parse_page_number(text: str, token: str) -> int:
    text = text.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise PageSpecError(
            f"Invalid page number in '{token}'. Expected a positive integer."
        )

    page_num = int(text)
    if page_num < 1:
        raise PageSpecError(
            f"Invalid page number in '{token}'. Page numbers must be >= 1."
        )
    return page_num


def parse_page_spec(page_spec: str) -> PageList:
    """Parse ``page_spec`` into an ordered list of 1-based page numbers.

    Components are separated by commas. Each one is either a single page
    number or an inclusive ``start-end`` range, which expands in ascending
    order at its position in the sequence. The user's ordering and any
    repeated pages are kept as given.

    No bounds checking happens here; the page count of the target document
    is only known to the assembler.

    Raises:
        PageSpecError: If the specification is empty or any component is
            malformed. Nothing is returned for a partially valid input.
    """

    if not page_spec or not page_spec.strip():
        raise PageSpecError("Page specification cannot be empty")

    pages: PageList = []
    for token in page_spec.split(","):
        token = token.strip()
        if not token:
            raise PageSpecError(
                f"Empty entry in page specification: '{page_spec}'."
            )

        if "-" in token:
            parts = token.split("-")
            if len(parts) != 2:
                raise PageSpecError(
                    f"Invalid page range format: '{token}'. Expected 'start-end'."
                )

            start = _parse_page_number(parts[0], token)
            end = _parse_page_number(parts[1], token)
            if start > end:
                raise PageSpecError(
                    f"Invalid range '{token}': start page ({start}) must be <= end page ({end})."
                )

            pages.extend(range(start, end + 1))
        else:
            pages.append(_parse_page_number(token, token))

    return pages


def format_page_list(pages: Iterable[int]) -> str:
    """Render ``pages`` back into compact specification text.

    Runs of consecutive ascending numbers collapse into ``start-end``;
    everything else keeps its original position, so
    ``parse_page_spec(format_page_list(pages)) == list(pages)``.
    """

    parts: List[str] = []
    run_start = None
    run_end = None
    for page in pages:
        if run_end is not None and page == run_end + 1:
            run_end = page
            continue
        if run_start is not None:
            parts.append(_format_run(run_start, run_end))
        run_start = run_end = page

    if run_start is not None:
        parts.append(_format_run(run_start, run_end))
    return ", ".join(parts)


def _format_run(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}-{end}"


__all__ = ["PageList", "parse_page_spec", "format_page_list"]
