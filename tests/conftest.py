from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Page n of a generated document is (BASE_WIDTH + n) points wide, so a chunk's
# pages can be traced back to the original page numbers.
BASE_WIDTH = 100


@pytest.fixture()
def read_page_numbers() -> Callable[[Path], list[int]]:
    """Return the original page numbers found in a written chunk, in order."""

    def _read(path: Path) -> list[int]:
        reader = PdfReader(str(path))
        return [int(page.mediabox.width) - BASE_WIDTH for page in reader.pages]

    return _read


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str = "document.pdf",
        pages: int = 10,
        *,
        title: Optional[str] = None,
        password: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for number in range(1, pages + 1):
            writer.add_blank_page(width=BASE_WIDTH + number, height=200)
        metadata = {"/Producer": "pdf-chunker-tests"}
        if title is not None:
            metadata["/Title"] = title
        writer.add_metadata(metadata)
        if password is not None:
            writer.encrypt(password)
        with path.open("wb") as stream:
            writer.write(stream)
        return path

    return _create


@pytest.fixture()
def sample_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("sample.pdf", pages=10, title="Sample")


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def encrypted_pdf(pdf_factory: Callable[..., Path]) -> Path:
    return pdf_factory("secret.pdf", pages=4, password="secret")


@pytest.fixture()
def corrupt_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "corrupt.pdf"
    path.write_bytes(b"this is not a pdf at all")
    return path


@pytest.fixture()
def bookmarked_pdf(tmp_path: Path) -> Path:
    """Six pages, each with an outline item and a named destination."""

    path = tmp_path / "bookmarked.pdf"
    writer = PdfWriter()
    for number in range(1, 7):
        writer.add_blank_page(width=BASE_WIDTH + number, height=200)
        writer.add_outline_item(f"Page {number}", number - 1)
        writer.add_named_destination(f"dest-{number}", number - 1)
    with path.open("wb") as stream:
        writer.write(stream)
    return path
