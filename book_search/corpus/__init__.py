"""
Corpus module for turning scanned text sources into books.

Provides the JSON corpus loader, PDF extraction with pypdf and pdfplumber
backends, and a dispatcher over files and directories.
"""

from .json_loader import load_json_books, parse_books
from .pypdf_backend import PyPDFBackend
from .pdfplumber_backend import PDFPlumberBackend
from .pdf_loader import PDFBookLoader, build_fragments
from .loader import CorpusLoader

__all__ = [
    "load_json_books",
    "parse_books",
    "PyPDFBackend",
    "PDFPlumberBackend",
    "PDFBookLoader",
    "build_fragments",
    "CorpusLoader"
]
