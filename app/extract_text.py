from pathlib import Path
from typing import Optional
import io
import re

import requests
from pypdf import PdfReader
from docx import Document

from utils.text_processing import strip_html_page, truncate

MAX_CHARS = 150000


class ExtractionError(ValueError):
    pass


class FetchError(ValueError):
    pass


def _clean(txt: str) -> str:
    # normalize whitespace
    return re.sub(r"\s+", " ", (txt or "")).strip()


def extract_text_from_pdf(data: bytes) -> str:
    reader = PdfReader(io.BytesIO(data))
    parts = []
    for page in reader.pages:
        parts.append(page.extract_text() or "")
    return _clean(" ".join(parts))


def extract_text_from_docx(data: bytes) -> str:
    doc = Document(io.BytesIO(data))
    parts = [p.text for p in doc.paragraphs]
    return _clean("\n".join(parts))


def extract_text(
    data: bytes,
    filename: Optional[str] = None,
    content_type: Optional[str] = None,
    limit: int = MAX_CHARS,
) -> str:
    """PDF and DOCX uploads are parsed; anything else is read as UTF-8 text."""
    suffix = Path(filename or "").suffix.lower()

    try:
        if suffix == ".pdf" or (content_type and "pdf" in content_type):
            text = extract_text_from_pdf(data)
        elif suffix == ".docx" or (content_type and "wordprocessingml" in content_type):
            text = extract_text_from_docx(data)
        else:
            text = data.decode("utf-8", errors="replace")
    except Exception as e:
        raise ExtractionError(f"Failed to extract text: {e}") from e
    return truncate(text, limit)


def fetch_url_text(
    url: str,
    timeout: float = 10,
    limit: int = MAX_CHARS,
    session: Optional[requests.Session] = None,
) -> str:
    if not url.lower().startswith(("http://", "https://")):
        raise FetchError("Invalid URL format.")
    http = session or requests
    try:
        r = http.get(url, timeout=timeout, headers={"User-Agent": "Mozilla/5.0"})
        r.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"Failed to fetch url: {e}") from e
    return truncate(strip_html_page(r.text), limit)
