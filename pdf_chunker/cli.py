"""
Command-line interface for PDF chunker.
"""

import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, TextColumn, BarColumn, TimeRemainingColumn, TaskProgressColumn
from rich.table import Table

from pdf_chunker import __version__
from pdf_chunker.config import DEFAULT_PREFIX, PREFIX_ENV_VAR
from pdf_chunker.directives import parse_directive
from pdf_chunker.exceptions import PDFChunkerException
from pdf_chunker.extractor import check_prefix
from pdf_chunker.planner import plan, resolve_chunk_size
from pdf_chunker.splitter import PDFChunker
from pdf_chunker.utils import configure_logging, format_file_size

console = Console()


def _validate_prefix(ctx, param, value):
    try:
        return check_prefix(value)
    except ValueError as e:
        raise click.BadParameter(str(e))


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(message))}", soft_wrap=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def cli(verbose):
    """
    PDF Chunker CLI - Split PDF files into contiguous chunks of pages.
    """
    configure_logging(verbose)


@cli.command(name="split")
@click.option(
    '--input', '-i', 'input_pdf',
    required=True,
    help='Path to the input PDF file',
    type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    '--output', '-o', 'output_dir',
    required=True,
    help='Path to the output directory',
    type=click.Path(file_okay=False)
)
@click.option(
    '--split', '-s', 'split_spec',
    required=True,
    help="Pages per chunk (e.g. '30') or number of equal chunks (e.g. 'c5')",
    type=str
)
@click.option(
    '--prefix', '-p',
    default=DEFAULT_PREFIX,
    envvar=PREFIX_ENV_VAR,
    show_default=True,
    callback=_validate_prefix,
    help='Prefix for output filenames',
    type=str
)
@click.option(
    '--password',
    default=None,
    help='Password for encrypted PDFs',
    type=str
)
@click.option('--quiet', '-q', is_flag=True, help='Only print one line per chunk')
def split(input_pdf, output_dir, split_spec, prefix, password, quiet):
    """
    Split a PDF into chunks of N pages or into N equal chunks.

    Examples:

        pdf-chunker split -i input.pdf -o chunks -s 30

        pdf-chunker split -i input.pdf -o chunks -s c5

        pdf-chunker split -i input.pdf -o chunks -s 10 -p part
    """
    try:
        directive = parse_directive(split_spec)
        chunker = PDFChunker(input_pdf, password=password)

        if not quiet:
            info = chunker.info()
            chunk_size = resolve_chunk_size(chunker.num_pages, directive) if chunker.num_pages else 0
            num_chunks = len(chunker.plan(directive)) if chunker.num_pages else 0

            info_table = Table(title="PDF Information", show_header=False)
            info_table.add_column("Property", style="cyan")
            info_table.add_column("Value", style="green")

            info_table.add_row("File", os.path.basename(input_pdf))
            info_table.add_row("Pages", str(info.num_pages))
            info_table.add_row("Size", format_file_size(info.file_size))
            if info.title:
                info_table.add_row("Title", info.title)
            info_table.add_row("Directive", str(directive))
            info_table.add_row("Chunk Size", f"{chunk_size} pages")
            info_table.add_row("Chunks", str(num_chunks))

            console.print(info_table)

        if quiet:
            def report(artifact, total):
                console.print(str(artifact), soft_wrap=True, markup=False, highlight=False)

            result = chunker.split(directive, output_dir, prefix=prefix, progress_callback=report)
        else:
            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                TimeRemainingColumn(),
                console=console
            ) as progress:
                task = progress.add_task("Writing chunks", total=num_chunks)

                def report(artifact, total):
                    progress.console.print(str(artifact), soft_wrap=True, markup=False, highlight=False)
                    progress.update(task, completed=artifact.index)

                result = chunker.split(directive, output_dir, prefix=prefix, progress_callback=report)

        if not quiet:
            console.print(f"\n[bold green]✓ Successfully created {result.total_files} chunk(s)[/bold green]")
            console.print(f"[dim]Output directory: {os.path.abspath(output_dir)}[/dim]")
            console.print()

    except PDFChunkerException as e:
        _fail(e)
    except Exception as e:
        _fail(f"Unexpected error: {e}")


@cli.command(name="plan")
@click.option(
    '--split', '-s', 'split_spec',
    required=True,
    help="Pages per chunk (e.g. '30') or number of equal chunks (e.g. 'c5')",
    type=str
)
@click.option(
    '--pages', '-n',
    default=None,
    help='Total page count to plan for',
    type=click.IntRange(min=0)
)
@click.option(
    '--input', '-i', 'input_pdf',
    default=None,
    help='Read the page count from this PDF instead',
    type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    '--password',
    default=None,
    help='Password for encrypted PDFs',
    type=str
)
def show_plan(split_spec, pages, input_pdf, password):
    """
    Show the page ranges a split would produce, without writing anything.

    Examples:

        pdf-chunker plan -s 3 --pages 10

        pdf-chunker plan -s c4 -i input.pdf
    """
    if (pages is None) == (input_pdf is None):
        _fail("Provide exactly one of --pages or --input")

    try:
        directive = parse_directive(split_spec)
        page_count = pages if input_pdf is None else PDFChunker(input_pdf, password=password).num_pages
        ranges = plan(page_count, directive)

        table = Table(title=f"Plan: {page_count} pages, directive {directive}")
        table.add_column("Chunk", style="cyan", no_wrap=True)
        table.add_column("Pages", style="green")
        table.add_column("Count", style="green", justify="right")

        for index, page_range in enumerate(ranges, start=1):
            table.add_row(str(index), f"{page_range.start}-{page_range.end}", str(page_range.page_count))

        console.print()
        console.print(table)
        console.print(f"[dim]Chunk size: {resolve_chunk_size(page_count, directive)} pages[/dim]")
        console.print()

    except PDFChunkerException as e:
        _fail(e)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '--password',
    default=None,
    help='Password for encrypted PDFs',
    type=str
)
def show_info(input_pdf, password):
    """
    Display information about a PDF file.

    Example:

        pdf-chunker info input.pdf
    """
    try:
        info = PDFChunker(input_pdf, password=password).info()

        table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", os.path.abspath(input_pdf))
        table.add_row("File Size", format_file_size(info.file_size))
        table.add_row("Number of Pages", str(info.num_pages))
        table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")

        if info.title:
            table.add_row("Title", info.title)
        if info.author:
            table.add_row("Author", info.author)

        console.print()
        console.print(table)
        console.print()

    except PDFChunkerException as e:
        _fail(e)


if __name__ == '__main__':
    cli()
