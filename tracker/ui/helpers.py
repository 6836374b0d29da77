"""
helpers.py - UI helper functions
Single responsibility: small formatting, parsing and escaping helpers used across UI.
"""
import getpass
import re
from datetime import datetime

# CommonMark lets any ASCII punctuation be backslash-escaped
_MARKDOWN_SPECIAL_RE = re.compile(r"([!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])")


def current_user() -> str:
    return getpass.getuser()


def format_datetime(iso_str: str) -> str:
    """ISO 8601 string to "YYYY-MM-DD HH:MM"; fallback to raw on error."""
    try:
        dt = datetime.fromisoformat(iso_str)
        return dt.strftime("%Y-%m-%d %H:%M")
    except (ValueError, TypeError):
        return iso_str or ""


def parse_labels(text: str | None) -> list[str]:
    """Normalize comma/newline-separated labels into a unique list."""
    if not text:
        return []
    labels = []
    seen = set()
    raw = text.replace("\n", ",").replace("、", ",")
    for part in raw.split(","):
        name = part.strip()
        if not name or name in seen:
            continue
        seen.add(name)
        labels.append(name)
    return labels


def escape_markdown(text) -> str:
    """Escape stored text so Markdown renders it literally.

    Every ASCII punctuation character is backslash-escaped, which disables
    inline HTML, autolinks, links, images, emphasis, headings, lists and
    code spans. Line breaks become hard breaks so paragraphs keep their shape.
    """
    if text is None:
        return ""
    escaped = _MARKDOWN_SPECIAL_RE.sub(r"\\\1", str(text))
    lines = escaped.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    lines = [line.strip() for line in lines]
    # A hard break at the very start or end of a paragraph renders as a literal backslash
    while lines and not lines[-1]:
        lines.pop()
    while lines and not lines[0]:
        lines.pop(0)
    return "\\\n".join(lines)
