import io
import logging

import pdfplumber
from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".pdf", ".txt")


class InputDecodingError(ValueError):
    """Resume content could not be turned into text."""


def extract_text_from_pdf_fileobj(fileobj) -> str:
    text = ""
    fileobj.seek(0)
    with pdfplumber.open(fileobj) as pdf:
        for page in pdf.pages:
            text += page.extract_text() or ""
    return (text or "").strip()


def extract_text_with_pypdf2(fileobj) -> str:
    fileobj.seek(0)
    reader = PdfReader(fileobj)
    buf = []
    for page in reader.pages:
        buf.append(page.extract_text() or "")
    return "\n".join(buf).strip()


def extract_text_from_bytes_or_txt(filename: str, raw: bytes) -> str:
    name = (filename or "").lower()
    if not name.endswith(".txt"):
        raise InputDecodingError("Only .txt content can be decoded directly.")
    return raw.decode("utf-8", errors="ignore").strip()


def extract_resume_text(filename: str, raw: bytes) -> str:
    """Decode an uploaded resume (.pdf or .txt) to plain text.

    PDFs go through pdfplumber first and PyPDF2 second. Raises
    InputDecodingError when neither yields text or the format is unsupported.
    """
    name = (filename or "").lower()
    if not name.endswith(SUPPORTED_EXTENSIONS):
        raise InputDecodingError("Only .pdf or .txt files are accepted.")

    if name.endswith(".txt"):
        content = extract_text_from_bytes_or_txt(name, raw)
    else:
        try:
            content = extract_text_from_pdf_fileobj(io.BytesIO(raw))
        except Exception as e1:
            logger.warning("pdfplumber failed on %s: %s", filename, e1)
            try:
                content = extract_text_with_pypdf2(io.BytesIO(raw))
            except Exception as e2:
                raise InputDecodingError(f"upload/parse error: {e1} | {e2}") from e2

    if not content.strip():
        raise InputDecodingError("No readable text found in the uploaded file.")
    return content


def make_preview(content: str, limit: int = 1200) -> str:
    preview = (content or "").replace("\r\n", "\n").replace("\r", "\n")
    preview = "\n".join(line.strip() for line in preview.splitlines())
    return preview[:limit]
