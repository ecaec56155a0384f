"""
Builds books from scanned PDFs with automatic backend fallback.

Each non-blank line of each page becomes one Fragment, numbered from 1
within its page. Tries the primary backend first and falls back to the
secondary one when extraction fails or yields no text.
"""

import re
from pathlib import Path
from typing import List, Tuple, Union

from ..core import get_config, get_logger, ExtractionError
from ..search.models import Book, Fragment
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend

logger = get_logger(__name__)


BACKENDS = {
    "pypdf": PyPDFBackend,
    "pdfplumber": PDFPlumberBackend
}


class PDFBookLoader:
    """
    Loads one scanned PDF as a Book.
    """

    def __init__(
        self,
        primary_backend: str = None,
        fallback_backend: str = None
    ):
        """
        Initialize the loader with configured backends.

        Args:
            primary_backend: Name of primary backend ("pypdf" or "pdfplumber").
            fallback_backend: Name of fallback backend, or "" for none.
        """
        if primary_backend is None or fallback_backend is None:
            config = get_config()
            primary_backend = primary_backend or config.corpus.primary_backend
            if fallback_backend is None:
                fallback_backend = config.corpus.fallback_backend

        if primary_backend not in BACKENDS:
            raise ExtractionError(f"Unknown backend: {primary_backend}")

        self.primary = BACKENDS[primary_backend]()
        self.fallback = BACKENDS[fallback_backend]() if fallback_backend in BACKENDS else None

        logger.debug(
            f"Initialized PDF loader: primary={primary_backend}, fallback={fallback_backend}"
        )

    def load(self, filepath: Union[str, Path], isbn: str = None, title: str = None) -> Book:
        """
        Extract a PDF into a Book.

        Args:
            filepath: Path to the PDF file.
            isbn: Book identifier. Defaults to the file stem.
            title: Book title. Defaults to the file stem made readable.

        Returns:
            Book whose fragments follow page then line order.

        Raises:
            ExtractionError: If every backend fails or returns no text.
        """
        filepath = Path(filepath)
        pages = self.extract_lines(filepath)

        content = tuple(build_fragments(pages))

        logger.info(f"Loaded {len(content)} lines from {len(pages)} pages: {filepath.name}")

        return Book(
            isbn=isbn or filepath.stem,
            title=title or _title_from_stem(filepath.stem),
            content=content
        )

    def extract_lines(self, filepath: Path) -> List[Tuple[int, List[str]]]:
        """Run the primary backend, then the fallback if needed."""
        primary_error = None

        try:
            pages = self.primary.extract_lines(filepath)

            if pages:
                return pages

            logger.debug(f"Primary backend returned no text: {filepath.name}")

        except ExtractionError as e:
            primary_error = e
            logger.debug(f"Primary backend failed: {e.message}")

        if self.fallback:
            try:
                logger.debug(f"Trying fallback backend for: {filepath.name}")
                pages = self.fallback.extract_lines(filepath)

                if pages:
                    return pages

            except ExtractionError as e:
                logger.debug(f"Fallback backend also failed: {e.message}")

        if primary_error:
            raise primary_error

        raise ExtractionError(
            "All backends returned empty results",
            filepath=str(filepath)
        )


def build_fragments(pages: List[Tuple[int, List[str]]]) -> List[Fragment]:
    """
    Turn (page, lines) pairs into fragments.

    Blank lines are dropped and do not consume a line number.
    """
    fragments = []

    for page_num, lines in pages:
        line_num = 0
        for raw_line in lines:
            text = raw_line.rstrip()
            if not text.strip():
                continue
            line_num += 1
            fragments.append(Fragment(page=page_num, line=line_num, text=text))

    return fragments


def _title_from_stem(stem: str) -> str:
    return re.sub(r"[_\-]+", " ", stem).strip()


if __name__ == "__main__":
    import sys

    if len(sys.argv) < 2:
        print("Usage: python pdf_loader.py <pdf_file> [isbn]")
        sys.exit(1)

    pdf_path = Path(sys.argv[1])
    if not pdf_path.exists():
        print(f"File not found: {pdf_path}")
        sys.exit(1)

    loader = PDFBookLoader(primary_backend="pypdf", fallback_backend="pdfplumber")

    try:
        book = loader.load(pdf_path, isbn=sys.argv[2] if len(sys.argv) > 2 else None)
        print(f"{book.title} ({book.isbn}): {len(book.content)} lines")

        for fragment in book.content[:10]:
            print(f"  p{fragment.page} l{fragment.line}: {fragment.text}")

    except ExtractionError as e:
        print(f"Extraction failed: {e.message}")
