"""
pypdf-based text extraction backend.

Fast line extraction suitable for most scanned books with an OCR text layer.
Handles encryption detection and empty password decryption.
"""

from pathlib import Path
from typing import List, Tuple, Union

from pypdf import PdfReader

from ..core import get_logger, ExtractionError

logger = get_logger(__name__)


class PyPDFBackend:
    """
    Page-by-page line extraction using the pypdf library.
    """

    name = "pypdf"

    def extract_lines(self, filepath: Union[str, Path]) -> List[Tuple[int, List[str]]]:
        """
        Extract the text lines of every page.

        Args:
            filepath: Path to the PDF file.

        Returns:
            List of (page_number, lines) tuples. Page numbers are 1-indexed;
            pages without text are omitted.

        Raises:
            ExtractionError: If the document cannot be read.
        """
        filepath = Path(filepath)
        results = []

        try:
            reader = PdfReader(filepath)

            if reader.is_encrypted:
                try:
                    reader.decrypt("")
                except Exception:
                    raise ExtractionError(
                        "PDF is encrypted and cannot be decrypted",
                        filepath=str(filepath)
                    )

            logger.debug(f"Processing {len(reader.pages)} pages: {filepath.name}")

            for page_num, page in enumerate(reader.pages, start=1):
                try:
                    text = page.extract_text() or ""
                except Exception as e:
                    logger.warning(
                        f"Failed to extract page {page_num} from {filepath.name}: {e}"
                    )
                    continue

                lines = text.splitlines()
                if any(line.strip() for line in lines):
                    results.append((page_num, lines))
                else:
                    logger.debug(f"Empty page {page_num} in {filepath.name}")

        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(
                f"pypdf extraction failed: {e}",
                filepath=str(filepath)
            )

        return results
