"""Identifier derivation from free text."""
import re
import unicodedata

_NON_ALNUM_PATTERN = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    """
    Derive a URL-safe id from human text.

    "My Project!" -> "my-project", "Crème brûlée" -> "creme-brulee".
    Deterministic and idempotent; collisions are the caller's problem.
    Text without any letters or digits yields an empty string.
    """
    folded = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    return _NON_ALNUM_PATTERN.sub("-", folded.strip().lower()).strip("-")
