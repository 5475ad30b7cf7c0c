from __future__ import annotations

from .post import Article
from .tags import extract_block, extract_tag_text


def _cover_url(buffer: str) -> str:
    block = extract_block(buffer, "media")
    if block is None:
        return ""
    return extract_tag_text(block, "thumb") or extract_tag_text(block, "url")


def decode_article(buffer: str) -> Article | None:
    """
    Decode a shared link. Title, description and link are read from anywhere in
    the payload; the cover comes from the first media block only.
    """
    title = extract_tag_text(buffer, "title")
    url = extract_tag_text(buffer, "contentUrl")

    if not title and not url:
        return None

    return Article(
        title=title,
        description=extract_tag_text(buffer, "description"),
        url=url,
        cover_url=_cover_url(buffer),
    )
