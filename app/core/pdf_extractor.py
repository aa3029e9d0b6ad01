import logging
import re
from io import BytesIO

import pdfplumber

logger = logging.getLogger(__name__)

# Private-use glyphs some templates emit for bullets.
PRIVATE_USE_BULLET_RE = re.compile(r"^[\uf0b7\uf0a7\uf076]\s*", re.MULTILINE)


def extract_pdf_text(pdf_bytes: bytes, x_tolerance: float = 2) -> str:
    """
    Extract the text layer of a PDF, page by page, one visual line per line.

    Returns "" for scanned PDFs without a text layer; OCR is not attempted.
    """
    pages = []
    with pdfplumber.open(BytesIO(pdf_bytes)) as pdf:
        for page_i, page in enumerate(pdf.pages, start=1):
            text = page.extract_text(x_tolerance=x_tolerance) or ""
            if not text.strip():
                logger.debug(f"PDF page {page_i} has no text layer")
                continue
            pages.append(PRIVATE_USE_BULLET_RE.sub("• ", text))
    return "\n".join(pages)
