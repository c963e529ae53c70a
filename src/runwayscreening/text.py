"""Pure string helpers for derived candidate and export fields."""

from __future__ import annotations

import re
from typing import Iterable

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[-_]")
_EXTENSION_RE = re.compile(r"\.[^./\\]+$")

DEFAULT_ROLE_TITLE = "Position"
DEFAULT_CONTACT_DOMAIN = "email.com"


def role_title(text: str, default: str = DEFAULT_ROLE_TITLE) -> str:
    """Return the display title of a job description.

    The title is the first line cut at its first period, e.g.
    ``"Senior Backend Engineer. Requires Go"`` -> ``"Senior Backend Engineer"``.
    """
    first_line = text.split("\n", 1)[0]
    title = first_line.split(".", 1)[0].strip()
    return title or default


def display_name(file_name: str) -> str:
    """Strip the extension and turn ``-``/``_`` separators into spaces."""
    stem = _EXTENSION_RE.sub("", file_name.strip())
    return _SEPARATOR_RE.sub(" ", stem).strip()


def contact_handle(name: str, domain: str = DEFAULT_CONTACT_DOMAIN) -> str:
    """Build the synthetic contact address shown next to a candidate."""
    local_part = _WHITESPACE_RE.sub(".", name.strip().lower())
    return f"{local_part}@{domain}"


def slugify(text: str) -> str:
    return _WHITESPACE_RE.sub("-", text.strip().lower())


def format_size_mb(size_bytes: int) -> str:
    return f"{size_bytes / 1024 / 1024:.2f} MB"


def has_allowed_extension(file_name: str, extensions: Iterable[str]) -> bool:
    lowered = file_name.lower()
    return any(lowered.endswith(ext.lower()) for ext in extensions)


__all__ = [
    "DEFAULT_CONTACT_DOMAIN",
    "DEFAULT_ROLE_TITLE",
    "contact_handle",
    "display_name",
    "format_size_mb",
    "has_allowed_extension",
    "role_title",
    "slugify",
]
