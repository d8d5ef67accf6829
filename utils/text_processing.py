import re

from markdown_it import MarkdownIt

_SCRIPT = re.compile(r"<script[\s\S]*?</script>", re.IGNORECASE)
_STYLE = re.compile(r"<style[\s\S]*?</style>", re.IGNORECASE)
_TAG = re.compile(r"<[^>]+>")
_WS = re.compile(r"\s+")
# HTML5 allows a bare "&" when followed by whitespace, so headings like
# "Data & Privacy" are emitted exactly as written.
_ESCAPED_BARE_AMP = re.compile(r"&amp;(?=\s)")

# CommonMark + GFM tables, strikethrough and autolinks. Raw HTML in the
# source is escaped, never passed through.
_md = MarkdownIt("gfm-like", {"html": False})


def render_markdown(md: str) -> str:
    """
    Convert GitHub-flavored Markdown to HTML. ``# Title`` becomes
    ``<h1>Title</h1>``, ``## Title`` becomes ``<h2>Title</h2>``; lists may
    interrupt a paragraph, nest by indentation, and bare URLs become links.
    """
    html = _md.render(md or "")
    return _ESCAPED_BARE_AMP.sub("&", html)


def collapse_whitespace(text: str) -> str:
    return _WS.sub(" ", text or "").strip()


def strip_tags(html: str) -> str:
    return _TAG.sub(" ", html or "")


def html_to_text(html: str) -> str:
    return collapse_whitespace(strip_tags(html))


def word_count(html: str) -> int:
    text = html_to_text(html)
    return len(text.split(" ")) if text else 0


def strip_html_page(html: str) -> str:
    # crude text extraction: drop scripts/styles, then every remaining tag
    html = _SCRIPT.sub("", html or "")
    html = _STYLE.sub("", html)
    return collapse_whitespace(strip_tags(html))


def truncate(text: str, limit: int) -> str:
    return (text or "")[:limit]
