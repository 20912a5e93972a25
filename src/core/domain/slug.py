"""URL slug helpers."""

import re
import unicodedata

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def slugify(text: str, max_length: int = 200) -> str:
    """Convert a title to a lowercase ASCII slug.

    "Leadership & Management 101" -> "leadership-management-101"
    """
    text = unicodedata.normalize("NFKD", text)
    text = "".join(c for c in text if not unicodedata.combining(c))
    text = text.encode("ascii", "ignore").decode("ascii").lower()
    text = re.sub(r"[^a-z0-9\s_-]", "", text)
    text = re.sub(r"[\s_-]+", "-", text).strip("-")
    return text[:max_length].rstrip("-")


def is_valid_slug(value: str) -> bool:
    return bool(SLUG_PATTERN.fullmatch(value))
