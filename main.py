from pathlib import Path
import argparse
import logging
import mimetypes
import os

from app.extract_text import extract_text, fetch_url_text
from pipelines.genai_pipeline import Summarizer, SummaryResult
from utils.config import Settings

# Get project root (folder where main.py is located)
PROJECT_ROOT = Path(__file__).resolve().parent
DEFAULT_OUTPUT = PROJECT_ROOT / "data" / "processed" / "summary.html"

logger = logging.getLogger("laymans_terms")


def acquire_text(source: str, settings: Settings) -> str:
    """Read a local file (txt/pdf/docx) or fetch a web page."""
    if source.lower().startswith(("http://", "https://")):
        return fetch_url_text(source, timeout=settings.fetch_timeout, limit=settings.max_extract_chars)
    path = Path(source)
    content_type, _ = mimetypes.guess_type(path.name)
    return extract_text(path.read_bytes(), path.name, content_type, limit=settings.max_extract_chars)


def summarize_document(source: str, settings: Settings) -> SummaryResult:
    text = acquire_text(source, settings)
    return Summarizer(settings).summarize(text)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Summarize Terms & Conditions into plain English.")
    parser.add_argument("source", help="path to a .txt/.pdf/.docx file, or an http(s) URL")
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT, help="where to write the HTML")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    settings = Settings.from_env()
    result = summarize_document(args.source, settings)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(result.html, encoding="utf-8")
    logger.info("Wrote %s summary to %s", result.source.value, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
