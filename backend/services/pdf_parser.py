import io
import logging

import pdfplumber

logger = logging.getLogger(__name__)

PDF_TYPES = frozenset({"application/pdf"})
TEXT_TYPES = frozenset({"text/plain"})
# python-docx reads Office Open XML only; legacy .doc (application/msword) is not supported
DOCX_TYPES = frozenset({"application/vnd.openxmlformats-officedocument.wordprocessingml.document"})
SUPPORTED_TYPES = PDF_TYPES | TEXT_TYPES | DOCX_TYPES


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all text from a DOCX file."""
    from docx import Document

    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def extract_text_from_file(content: bytes, content_type: str) -> str:
    """Extract text from an uploaded CV based on its MIME type.

    Returns "" for empty content or an unsupported type.
    """
    if not content:
        return ""
    if content_type in PDF_TYPES:
        return extract_text(content)
    if content_type in TEXT_TYPES:
        return content.decode("utf-8", errors="replace").strip()
    if content_type in DOCX_TYPES:
        return extract_text_docx(content)
    logger.info("Unsupported CV content type: %s", content_type)
    return ""
