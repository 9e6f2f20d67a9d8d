import fitz  # PyMuPDF
from typing import List
import logging
import os

from pdf_digest.errors import ExtractionError

logger = logging.getLogger(__name__)

# Pages are separated by a blank line
PAGE_SEPARATOR = "\n\n"


# Main PDF to text extraction
def extract_text_from_pdf(pdf_path: str) -> str:

    if not os.path.exists(pdf_path):
        raise ExtractionError(pdf_path, "file not found")

    try:
        doc = fitz.open(pdf_path)
    except Exception as exc:
        raise ExtractionError(pdf_path, str(exc)) from exc

    pages: List[str] = []
    try:
        # Encrypted files open fine but refuse to load pages
        if doc.needs_pass:
            raise ExtractionError(pdf_path, "document is encrypted")

        for page_idx in range(doc.page_count):
            try:
                page = doc.load_page(page_idx)
                pages.append(page.get_text("text"))
            except Exception as exc:
                # One unreadable page fails the whole document
                raise ExtractionError(pdf_path, f"page {page_idx + 1}: {exc}") from exc
    finally:
        doc.close()

    logger.debug("Extracted %d page(s) from %s", len(pages), os.path.basename(pdf_path))

    return PAGE_SEPARATOR.join(pages)
