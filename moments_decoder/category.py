from __future__ import annotations

from typing import Literal, Mapping

from .coerce import parse_int
from .tags import extract_tag_text

Category = Literal["text", "image", "video", "article", "finder"]

CATEGORIES: tuple[Category, ...] = ("text", "image", "video", "article", "finder")

# Closed table; anything missing here decodes as plain text.
CATEGORY_CODES: Mapping[int, Category] = {
    1: "image",
    7: "image",
    6: "video",
    15: "video",
    3: "article",
    28: "finder",
}

CATEGORY_TAG = "type"


def category_from_code(code: int | None) -> Category:
    if code is None:
        return "text"
    return CATEGORY_CODES.get(code, "text")


def classify_category(buffer: str) -> Category:
    """Read the first `type` tag of a payload and map it through CATEGORY_CODES."""
    return category_from_code(parse_int(extract_tag_text(buffer, CATEGORY_TAG)))
