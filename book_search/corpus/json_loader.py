"""
Loader for scanned-text corpora stored as JSON.

The file holds an array of book records in the interchange layout:
[{"Title": ..., "ISBN": ..., "Content": [{"Page", "Line", "Text"}, ...]}].
"""

import json
from pathlib import Path
from typing import Any, List, Union

from ..core import get_logger, CorpusError, InvalidInputError
from ..search.models import Book

logger = get_logger(__name__)


def parse_books(data: Any, source: str = None) -> List[Book]:
    """
    Convert decoded JSON into books.

    Args:
        data: Decoded JSON value, expected to be a list of book records.
        source: Where the data came from, for error messages.

    Returns:
        Books in file order.

    Raises:
        CorpusError: If the top level is not an array or a record is malformed.
    """
    if not isinstance(data, list):
        raise CorpusError(
            f"Corpus must be a JSON array of books, got {type(data).__name__}",
            path=source
        )

    books = []
    for index, record in enumerate(data):
        try:
            books.append(Book.from_dict(record))
        except InvalidInputError as e:
            raise CorpusError(
                f"Invalid book record at index {index}: {e.message}",
                path=source,
                details={"index": index, **e.details}
            )

    return books


def load_json_books(path: Union[str, Path], encoding: str = "utf-8") -> List[Book]:
    """
    Load books from a JSON corpus file.

    Raises:
        CorpusError: If the file is missing, unreadable or not a valid corpus.
    """
    path = Path(path)

    if not path.is_file():
        raise CorpusError(f"Corpus file not found: {path}", path=str(path))

    try:
        with open(path, "r", encoding=encoding) as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CorpusError(f"Invalid JSON in corpus file: {e}", path=str(path))
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read corpus file: {e}", path=str(path))

    books = parse_books(data, source=str(path))

    logger.info(f"Loaded {len(books)} books from {path.name}")
    return books
