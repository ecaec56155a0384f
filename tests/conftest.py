"""
Pytest fixtures and configuration for the test suite.

Provides temporary directories, sample corpora, and mock configurations
to ensure tests are isolated and safe. Every book fixture is built fresh
per test.
"""

import json
import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

import sys
_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from book_search.search.models import Book, Fragment  # noqa: E402


TWENTY_LEAGUES_RECORDS = [
    {
        "Title": "Twenty Thousand Leagues Under the Sea",
        "ISBN": "9780000528531",
        "Content": [
            {
                "Page": 31,
                "Line": 8,
                "Text": "now simply went on by her own momentum.  The dark-"
            },
            {
                "Page": 31,
                "Line": 9,
                "Text": "ness was then profound; and however good the Canadian's"
            },
            {
                "Page": 31,
                "Line": 10,
                "Text": "eyes were, I asked myself how he had managed to see, and"
            }
        ]
    }
]


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory, cleaned up after test.
    """
    tmp = tempfile.mkdtemp(prefix="book_search_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def temp_config(temp_dir: Path) -> Generator[Path, None, None]:
    """
    Create a temporary config.json for testing.

    Args:
        temp_dir: Temporary directory fixture.

    Yields:
        Path to temporary config file.
    """
    config_dir = temp_dir / "config"
    config_dir.mkdir()

    data_dir = temp_dir / "data"
    data_dir.mkdir()

    output_dir = temp_dir / "output"
    output_dir.mkdir()

    logs_dir = output_dir / "logs"
    logs_dir.mkdir()

    config_data = {
        "paths": {
            "data_directory": str(data_dir),
            "logs_directory": str(logs_dir)
        },
        "corpus": {
            "supported_extensions": [".json", ".pdf"],
            "primary_backend": "pdfplumber",
            "fallback_backend": "pypdf",
            "encoding": "utf-8"
        },
        "search": {
            "allow_empty_term": True,
            "context_length": 40
        },
        "gui": {
            "page_title": "Test Book Search",
            "results_per_page": 10,
            "show_fragment_text": False
        },
        "logging": {
            "level": "DEBUG",
            "format": "%(levelname)s - %(message)s",
            "max_file_size_mb": 1,
            "backup_count": 1
        }
    }

    config_path = config_dir / "config.json"
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config_data, f)

    yield config_path


@pytest.fixture
def twenty_leagues_records() -> list:
    """Fresh copy of the sample corpus in the JSON interchange layout."""
    return json.loads(json.dumps(TWENTY_LEAGUES_RECORDS))


@pytest.fixture
def twenty_leagues_book() -> Book:
    """The sample book built from dataclasses."""
    return Book(
        isbn="9780000528531",
        title="Twenty Thousand Leagues Under the Sea",
        content=(
            Fragment(page=31, line=8, text="now simply went on by her own momentum.  The dark-"),
            Fragment(page=31, line=9, text="ness was then profound; and however good the Canadian's"),
            Fragment(page=31, line=10, text="eyes were, I asked myself how he had managed to see, and"),
        )
    )


@pytest.fixture
def sample_corpus_file(temp_dir: Path, twenty_leagues_records: list) -> Path:
    """
    Write the sample corpus to a JSON file.

    Returns:
        Path to the created corpus file.
    """
    corpus_path = temp_dir / "twenty_leagues.json"
    corpus_path.write_text(json.dumps(twenty_leagues_records), encoding="utf-8")
    return corpus_path


@pytest.fixture
def sample_corpus_dir(temp_dir: Path, twenty_leagues_records: list) -> Path:
    """
    Create a directory tree holding several corpus files.

    Returns:
        Path to the corpus directory.
    """
    corpus_dir = temp_dir / "corpus"
    nested = corpus_dir / "nested"
    nested.mkdir(parents=True)

    (corpus_dir / "a_twenty_leagues.json").write_text(
        json.dumps(twenty_leagues_records), encoding="utf-8"
    )

    other = [{
        "Title": "The Mysterious Island",
        "ISBN": "9780000000002",
        "Content": [{"Page": 1, "Line": 1, "Text": "the balloon fell"}]
    }]
    (nested / "b_island.json").write_text(json.dumps(other), encoding="utf-8")

    (corpus_dir / "broken.json").write_text("{ not json", encoding="utf-8")
    (corpus_dir / "readme.txt").write_text("Not a corpus")

    return corpus_dir


@pytest.fixture
def reset_config_singleton():
    """
    Reset the config singleton between tests.

    This ensures each test gets a fresh config instance.
    """
    from book_search.core import config_loader
    config_loader._config_instance = None
    yield
    config_loader._config_instance = None


@pytest.fixture
def reset_logger_singleton():
    """
    Reset the logger initialization flag between tests.

    Handlers installed on the root logger during the test are removed so
    later tests start without them.
    """
    import logging
    from book_search.core import logger

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level

    logger._logger_initialized = False
    yield
    logger._logger_initialized = False

    for handler in root_logger.handlers[:]:
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
