"""
pdfplumber-based text extraction backend.

Groups characters into visual lines, which copes better with multi-column
and skewed scans than pypdf. Slower, so it serves as the fallback.
"""

from pathlib import Path
from typing import List, Tuple, Union

import pdfplumber

from ..core import get_logger, ExtractionError

logger = get_logger(__name__)


class PDFPlumberBackend:
    """
    Page-by-page line extraction using the pdfplumber library.
    """

    name = "pdfplumber"

    def extract_lines(self, filepath: Union[str, Path]) -> List[Tuple[int, List[str]]]:
        """
        Extract the text lines of every page.

        Args:
            filepath: Path to the PDF file.

        Returns:
            List of (page_number, lines) tuples. Page numbers are 1-indexed;
            pages without text are omitted.

        Raises:
            ExtractionError: If the document cannot be opened.
        """
        filepath = Path(filepath)
        results = []

        try:
            with pdfplumber.open(filepath) as pdf:
                logger.debug(f"Processing {len(pdf.pages)} pages: {filepath.name}")

                for page_num, page in enumerate(pdf.pages, start=1):
                    try:
                        lines = [item["text"] for item in page.extract_text_lines()]
                    except Exception as e:
                        logger.warning(
                            f"Failed to extract page {page_num} from {filepath.name}: {e}"
                        )
                        continue

                    if any(line.strip() for line in lines):
                        results.append((page_num, lines))
                    else:
                        logger.debug(f"Empty page {page_num} in {filepath.name}")

        except Exception as e:
            raise ExtractionError(
                f"pdfplumber extraction failed: {e}",
                filepath=str(filepath)
            )

        return results
