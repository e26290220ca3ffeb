"""
Command-line interface for PDF Shuffle.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.table import Table

from pdf_shuffle.assembler import DocumentAssembler, reversed_order
from pdf_shuffle.exceptions import PDFShuffleException
from pdf_shuffle.page_spec import format_page_list, parse_page_spec
from pdf_shuffle.utils import configure_logging, format_file_size, get_pdf_info

console = Console()

INPUT_PDF = click.Path(exists=True, dir_okay=False)


def _fail(exc):
    console.print(f"\n[bold red]✗ Error:[/bold red] {exc}")
    sys.exit(1)


def _report_created(created_files, output_dir):
    console.print(f"\n[bold green]✓ Successfully created {len(created_files)} file(s)[/bold green]")
    console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]")

    console.print("\n[bold]Created files:[/bold]")
    sample_size = min(5, len(created_files))
    for file_path in created_files[:sample_size]:
        console.print(f"  • {os.path.basename(file_path)}")

    if len(created_files) > sample_size:
        console.print(f"  ... and {len(created_files) - sample_size} more")

    console.print()


@click.group()
@click.version_option(version="1.0.0")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    PDF Shuffle - split, merge, extract and reorder PDF pages.
    """
    if verbose:
        configure_logging(logging.DEBUG)


@cli.command(name="info")
@click.argument('input_pdf', type=INPUT_PDF)
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        pdf-shuffle info input.pdf
    """
    try:
        info = get_pdf_info(input_pdf)
    except PDFShuffleException as e:
        _fail(e)

    table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")

    table.add_row("File Path", os.path.abspath(input_pdf))
    table.add_row("File Size", format_file_size(info.file_size))
    table.add_row("Number of Pages", str(info.num_pages))
    if info.title:
        table.add_row("Title", info.title)
    if info.author:
        table.add_row("Author", info.author)

    console.print()
    console.print(table)
    console.print()


@cli.command(name="split-range")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--start', '-s', required=True, type=int, help='Starting page number (1-indexed)')
@click.option('--end', '-e', required=True, type=int, help='Ending page number (1-indexed, inclusive)')
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
def split_range(input_pdf, start, end, output):
    """
    Write a range of pages into a single PDF.

    Example:

        pdf-shuffle split-range input.pdf -s 5 -e 10 -o chapter.pdf
    """
    console.print(f"\n[bold cyan]Extracting pages {start}-{end}...[/bold cyan]")
    try:
        output_file = DocumentAssembler().split_by_range(input_pdf, output, start, end)
    except PDFShuffleException as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {output_file}")
    console.print()


@cli.command(name="split-every")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--pages', '-n', required=True, type=int, help='Number of pages per output file')
@click.option('--output-dir', '-o', default='./output', type=click.Path(), help='Output directory')
def split_every(input_pdf, pages, output_dir):
    """
    Split a PDF into parts of N pages each.

    Examples:

        pdf-shuffle split-every input.pdf -n 5

        pdf-shuffle split-every input.pdf --pages 10 -o parts
    """
    console.print(f"\n[bold cyan]Splitting every {pages} page(s)...[/bold cyan]")
    try:
        created_files = DocumentAssembler().split_every_n(input_pdf, output_dir, pages)
    except PDFShuffleException as e:
        _fail(e)

    _report_created(created_files, output_dir)


@cli.command(name="split-pages")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--output-dir', '-o', default='./output', type=click.Path(), help='Output directory')
def split_pages(input_pdf, output_dir):
    """
    Split a PDF into individual pages.

    Example:

        pdf-shuffle split-pages input.pdf -o pages
    """
    console.print("\n[bold cyan]Splitting into single pages...[/bold cyan]")
    try:
        created_files = DocumentAssembler().split_into_single_pages(input_pdf, output_dir)
    except PDFShuffleException as e:
        _fail(e)

    _report_created(created_files, output_dir)


@cli.command(name="extract")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--pages', '-p', required=True, type=str, help="Pages to extract (e.g., '3, 1, 5-10')")
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
def extract(input_pdf, pages, output):
    """
    Extract specific pages, in the given order, into a new PDF.

    Examples:

        pdf-shuffle extract input.pdf -p '1,3,5' -o selected.pdf

        pdf-shuffle extract input.pdf --pages '10, 1-3, 1' --output handout.pdf
    """
    try:
        page_list = parse_page_spec(pages)
        console.print(f"[dim]Pages to extract: {format_page_list(page_list)}[/dim]")
        output_file = DocumentAssembler().extract_specific_pages(input_pdf, output, page_list)
    except PDFShuffleException as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {output_file}")
    console.print(f"[dim]Pages extracted: {len(page_list)}[/dim]")
    console.print()


@cli.command(name="reorder")
@click.argument('input_pdf', type=INPUT_PDF)
@click.option('--order', '-p', type=str, help="New page order (e.g., '3,1,2' or '5-1')")
@click.option('--reverse', is_flag=True, help='Reverse the page order')
@click.option('--strict', is_flag=True, help='Require every page exactly once')
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
def reorder(input_pdf, order, reverse, strict, output):
    """
    Write the pages of a PDF in a new order.

    Examples:

        pdf-shuffle reorder input.pdf -p '2,1,3-10' -o reordered.pdf

        pdf-shuffle reorder input.pdf --reverse -o backwards.pdf
    """
    if bool(order) == reverse:
        _fail("Provide exactly one of --order or --reverse")

    try:
        if reverse:
            page_list = reversed_order(get_pdf_info(input_pdf).num_pages)
        else:
            page_list = parse_page_spec(order)
        output_file = DocumentAssembler().reorder_pages(
            input_pdf, output, page_list, require_permutation=strict
        )
    except PDFShuffleException as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {output_file}")
    console.print()


@cli.command(name="merge")
@click.argument('input_pdfs', nargs=-1, required=True, type=INPUT_PDF)
@click.option('--output', '-o', required=True, type=click.Path(), help='Output PDF path')
def merge(input_pdfs, output):
    """
    Merge several PDFs, in the order given, into one.

    Example:

        pdf-shuffle merge cover.pdf body.pdf appendix.pdf -o book.pdf
    """
    console.print(f"\n[bold cyan]Merging {len(input_pdfs)} PDF(s)...[/bold cyan]")
    try:
        output_file = DocumentAssembler().merge_pdfs(input_pdfs, output)
    except PDFShuffleException as e:
        _fail(e)

    console.print(f"\n[bold green]✓ Successfully created:[/bold green] {output_file}")
    console.print()


if __name__ == '__main__':
    cli()
