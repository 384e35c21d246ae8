"""pypdf backend implementation for PDF Chunker."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

from pypdf import PdfReader, PdfWriter
from pypdf.errors import PdfReadError

from ..config import should_prune_orphans
from ..exceptions import (
    ChunkWriteError,
    DocumentLoadError,
    EncryptedPDFError,
    OutputDirectoryError,
)
from ..types import PDFInfo
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger("pdf_chunker.backends.pypdf")

_PROBE_NAME = ".pdf_chunker_probe"


def _open_reader(raw_bytes: bytes, source: str, password: Optional[str]) -> PdfReader:
    try:
        reader = PdfReader(io.BytesIO(raw_bytes))
    except PdfReadError as exc:
        raise DocumentLoadError(
            f"cannot load document: corrupted or invalid PDF file: {source}. Error: {exc}"
        ) from exc
    except Exception as exc:
        raise DocumentLoadError(
            f"cannot load document: unexpected error reading PDF: {source}. Error: {exc}"
        ) from exc

    if reader.is_encrypted:
        if not password:
            raise EncryptedPDFError(
                f"cannot load document: {source} is encrypted. Supply a password to process this file."
            )
        if reader.decrypt(password) == 0:
            raise EncryptedPDFError(
                f"cannot load document: failed to decrypt {source} with supplied password."
            )
    return reader


def _writer_bytes(writer: PdfWriter) -> bytes:
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


@dataclass
class PypdfDocument(BackendDocument):
    """A source document (reader-backed) or a working copy (writer-backed)."""

    raw_bytes: bytes
    source: str
    reader: Optional[PdfReader] = None
    writer: Optional[PdfWriter] = None
    password: Optional[str] = None

    @property
    def _pages(self):
        if self.writer is not None:
            return self.writer.pages
        return self.reader.pages

    @property
    def is_working_copy(self) -> bool:
        return self.writer is not None

    def page_count(self) -> int:
        return len(self._pages)

    def clone(self) -> "PypdfDocument":
        if self.writer is not None:
            raw_bytes = _writer_bytes(self.writer)
            password = None
        else:
            raw_bytes = self.raw_bytes
            password = self.password

        reader = _open_reader(raw_bytes, self.source, password)
        writer = PdfWriter(clone_from=reader)
        return PypdfDocument(
            file_size=self.file_size,
            raw_bytes=raw_bytes,
            source=self.source,
            writer=writer,
            password=password,
        )

    def remove_pages(self, page_numbers: Iterable[int]) -> None:
        if self.writer is None:
            raise TypeError("Pages can only be removed from a cloned working copy.")

        total = self.page_count()
        doomed = sorted(set(page_numbers), reverse=True)
        for page_number in doomed:
            if page_number < 1 or page_number > total:
                raise ValueError(
                    f"Page {page_number} is out of bounds. Document has {total} pages."
                )

        if not doomed:
            return

        # Rebuild from the kept pages only: outline items, named destinations
        # and link annotations aimed at removed pages are not carried over, so
        # nothing keeps the removed page objects alive.
        removed = set(doomed)
        kept = [index for index in range(total) if index + 1 not in removed]
        current = _open_reader(_writer_bytes(self.writer), self.source, None)
        rebuilt = PdfWriter()
        rebuilt.append(current, pages=kept)
        if current.metadata is not None:
            rebuilt.metadata = current.metadata
        self.writer = rebuilt
        LOGGER.debug("Removed %s page(s) from working copy of %s", len(removed), self.source)

    def serialize(self, destination: str | Path) -> None:
        if self.writer is None:
            raise TypeError("Only a cloned working copy can be serialized.")

        path = Path(destination)
        try:
            if should_prune_orphans():
                self.writer.compress_identical_objects(
                    remove_duplicates=False, remove_unreferenced=True
                )
            with path.open("wb") as handle:
                self.writer.write(handle)
        except OSError as exc:
            raise ChunkWriteError(
                f"Unable to write file: {destination}. Error: {exc}",
                destination=path,
            ) from exc
        except Exception as exc:  # pragma: no cover - depends on pypdf internals
            raise ChunkWriteError(
                f"Unexpected error writing file: {destination}. Error: {exc}",
                destination=path,
            ) from exc

    def describe(self) -> PDFInfo:
        reader = self.reader
        if reader is None:
            reader = _open_reader(self.raw_bytes, self.source, self.password)
        metadata = reader.metadata
        return PDFInfo(
            num_pages=self.page_count(),
            file_size=self.file_size,
            title=getattr(metadata, "title", None),
            author=getattr(metadata, "author", None),
            is_encrypted=bool(reader.is_encrypted),
        )


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: str | Path, password: str | None = None) -> PypdfDocument:
        path = Path(pdf_path)
        if not path.exists() or not path.is_file():
            raise DocumentLoadError(f"cannot load document: PDF file not found: {pdf_path}")

        try:
            raw_bytes = path.read_bytes()
        except OSError as exc:
            raise DocumentLoadError(
                f"cannot load document: unable to read PDF file: {pdf_path}. Error: {exc}"
            ) from exc

        reader = _open_reader(raw_bytes, str(pdf_path), password)
        try:
            num_pages = len(reader.pages)
        except Exception as exc:
            raise DocumentLoadError(
                f"cannot load document: unreadable page tree in {pdf_path}. Error: {exc}"
            ) from exc

        LOGGER.debug("Loaded %s (%s pages, %s bytes)", pdf_path, num_pages, len(raw_bytes))
        return PypdfDocument(
            file_size=len(raw_bytes),
            raw_bytes=raw_bytes,
            source=str(pdf_path),
            reader=reader,
            password=password,
        )

    def ensure_directory(self, directory: str | Path) -> Path:
        path = Path(directory)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputDirectoryError(
                f"cannot create output directory: {directory}. Error: {exc}"
            ) from exc

        probe = path / _PROBE_NAME
        try:
            with probe.open("wb") as handle:
                handle.write(b"0")
            probe.unlink()
        except OSError as exc:
            raise OutputDirectoryError(
                f"cannot write to output directory: {directory}. Error: {exc}"
            ) from exc

        return path
