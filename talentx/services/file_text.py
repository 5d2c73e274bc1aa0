# talentx/services/file_text.py
"""
Plain-text extraction for uploaded resumes.
- application/pdf -> pdfminer.six, page by page
- text/plain      -> UTF-8 decode, returned unchanged
Anything else is rejected before any parsing happens.
"""

import asyncio
import io
import logging
from typing import List

from pdfminer.high_level import extract_pages
from pdfminer.layout import LTTextContainer

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
TEXT_MIME = "text/plain"
SUPPORTED_MIME_TYPES = (PDF_MIME, TEXT_MIME)


class UnsupportedFileTypeError(ValueError):
    def __init__(self, content_type: str):
        super().__init__(f"Unsupported file type: {content_type}. Please upload a PDF or TXT file.")
        self.content_type = content_type


class FileReadError(RuntimeError):
    pass


def _base_mime(content_type: str) -> str:
    # "text/plain; charset=utf-8" -> "text/plain"
    return (content_type or "").split(";", 1)[0].strip().lower()


def _page_text(page_layout) -> str:
    runs: List[str] = []
    for element in page_layout:
        if isinstance(element, LTTextContainer):
            run = element.get_text().strip()
            if run:
                runs.append(run)
    return " ".join(runs)


def parse_pdf_bytes(content: bytes) -> str:
    text = ""
    for page_layout in extract_pages(io.BytesIO(content)):
        text += _page_text(page_layout) + "\n"
    return text


def parse_text_bytes(content: bytes) -> str:
    try:
        return content.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise FileReadError("Error reading file.") from exc


async def extract_text(content: bytes, content_type: str) -> str:
    mime = _base_mime(content_type)
    if mime not in SUPPORTED_MIME_TYPES:
        raise UnsupportedFileTypeError(content_type or "unknown")

    if mime == TEXT_MIME:
        return parse_text_bytes(content)

    # pdfminer is CPU bound; keep it off the event loop
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, parse_pdf_bytes, content)
    except Exception as exc:
        logger.exception("Error processing PDF upload")
        raise FileReadError(f"Error processing file: {exc}") from exc
