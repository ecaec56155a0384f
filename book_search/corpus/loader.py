"""
Corpus loader dispatching on file type.

Accepts a JSON corpus, a single scanned PDF, or a directory holding any mix
of both, and returns the books in a stable order.
"""

from pathlib import Path
from typing import List, Union

from ..core import get_config, get_logger, CorpusError
from ..search.models import Book
from .json_loader import load_json_books
from .pdf_loader import PDFBookLoader

logger = get_logger(__name__)


class CorpusLoader:
    """
    Loads books from files or directory trees.

    Directory entries are visited in sorted path order, so repeated loads
    of the same tree give the same book order.
    """

    def __init__(
        self,
        extensions: List[str] = None,
        encoding: str = None,
        pdf_loader: PDFBookLoader = None
    ):
        """
        Initialize the loader.

        Args:
            extensions: File extensions to accept (e.g., [".json", ".pdf"]).
            encoding: Text encoding of JSON corpora.
            pdf_loader: Loader used for PDFs; created on first use.
        """
        if extensions is None or encoding is None:
            config = get_config()
            extensions = extensions or config.corpus.supported_extensions
            encoding = encoding or config.corpus.encoding

        self.extensions = [ext.lower() for ext in extensions]
        self.encoding = encoding
        self._pdf_loader = pdf_loader

    @property
    def pdf_loader(self) -> PDFBookLoader:
        if self._pdf_loader is None:
            self._pdf_loader = PDFBookLoader()
        return self._pdf_loader

    def load(self, path: Union[str, Path]) -> List[Book]:
        """
        Load every book found at path.

        Raises:
            CorpusError: If path does not exist or is an unsupported file,
                or a single file fails to load.
        """
        path = Path(path)

        if path.is_dir():
            return self.load_directory(path)

        if not path.exists():
            raise CorpusError(f"Corpus path not found: {path}", path=str(path))

        return self.load_file(path)

    def load_file(self, path: Path) -> List[Book]:
        """Load a single JSON or PDF file."""
        suffix = path.suffix.lower()

        if suffix not in self.extensions:
            raise CorpusError(
                f"Unsupported corpus file type: {suffix or path.name}",
                path=str(path),
                details={"supported": self.extensions}
            )

        if suffix == ".json":
            return load_json_books(path, encoding=self.encoding)

        if suffix == ".pdf":
            return [self.pdf_loader.load(path)]

        raise CorpusError(f"No loader for file type: {suffix}", path=str(path))

    def load_directory(self, directory: Path) -> List[Book]:
        """
        Load all supported files below directory.

        Files that fail to load are logged and skipped.
        """
        logger.info(f"Scanning corpus directory: {directory}")

        books: List[Book] = []
        files_loaded = 0
        files_failed = 0

        for filepath in sorted(directory.rglob("*")):
            if not filepath.is_file() or filepath.suffix.lower() not in self.extensions:
                continue

            try:
                books.extend(self.load_file(filepath))
                files_loaded += 1
            except CorpusError as e:
                files_failed += 1
                logger.warning(f"Skipping {filepath.name}: {e.message}")

        logger.info(
            f"Corpus loaded: {len(books)} books from {files_loaded} files, "
            f"{files_failed} failed"
        )

        return books
