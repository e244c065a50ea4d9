import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file.

    Best effort: returns "" when the bytes cannot be read as a PDF, which the
    analyzer then rejects as empty input.
    """
    try:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        logger.warning("Could not extract text from PDF (%d bytes): %s", len(pdf_bytes), e)
        return ""
    return "\n".join(pages).strip()
