"""Title to filename slug conversion."""

import re

# Word characters are ASCII only; whitespace includes Unicode spaces
_SPECIAL_CHARS_RE = re.compile(r"[^A-Za-z0-9_\s-]")
_WHITESPACE_RE = re.compile(r"\s+")
_HYPHENS_RE = re.compile(r"-+")


def slugify(title: str) -> str:
    """
    Convert a title into a filesystem-safe slug.

    Example: "Project Ideas" -> "project-ideas"

    Never fails; a title made only of punctuation yields "".
    Distinct titles may share a slug ("API: Ideas!" and "api ideas").
    """
    slug = title.lower().strip()
    slug = _SPECIAL_CHARS_RE.sub("", slug)
    slug = _WHITESPACE_RE.sub("-", slug)
    slug = _HYPHENS_RE.sub("-", slug)
    return slug.strip("-")
