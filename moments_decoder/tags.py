from __future__ import annotations

import re
from functools import lru_cache
from xml.sax.saxutils import unescape

_ENTITIES = {"&quot;": '"', "&apos;": "'"}


def _unescape(text: str) -> str:
    if "&" not in text:
        return text
    return unescape(text, _ENTITIES)


@lru_cache(maxsize=128)
def _plain_text_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}>([^<]*)</{name}>")


@lru_cache(maxsize=128)
def _attributed_text_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}\s[^>]*>([^<]*)</{name}>")


@lru_cache(maxsize=128)
def _open_tag_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}(\s[^>]*)?/?>")


@lru_cache(maxsize=128)
def _attr_re(attr: str) -> re.Pattern[str]:
    return re.compile(rf"\s{re.escape(attr)}=\"([^\"]*)\"")


@lru_cache(maxsize=128)
def _block_re(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"<{name}(?:\s[^>]*)?>(.*?)</{name}>", re.DOTALL)


def extract_tag_text(buffer: str, tag: str) -> str:
    """
    Return the trimmed inner text of the first `<tag>...</tag>` in `buffer`.

    The plain opening tag is tried first; an opening tag carrying attributes
    (`<tag a="b">`) is only considered when no plain match exists. Missing tags
    and non-text input yield "".
    """
    if not isinstance(buffer, str) or not tag:
        return ""

    m = _plain_text_re(tag).search(buffer)
    if m is None:
        m = _attributed_text_re(tag).search(buffer)
    if m is None:
        return ""
    return _unescape(m.group(1).strip())


def extract_attr(buffer: str, tag: str, attr: str) -> str:
    """Return `attr="..."` from the first opening `<tag ...>` in `buffer`, or ""."""
    if not isinstance(buffer, str) or not tag or not attr:
        return ""

    opening = _open_tag_re(tag).search(buffer)
    if opening is None or not opening.group(1):
        return ""

    m = _attr_re(attr).search(opening.group(1))
    if m is None:
        return ""
    return _unescape(m.group(1))


def extract_block(buffer: str, tag: str) -> str | None:
    """
    Return the raw inner markup of the first `<tag>...</tag>` block.

    None means the block does not exist; an empty block returns "".
    """
    if not isinstance(buffer, str) or not tag:
        return None
    m = _block_re(tag).search(buffer)
    if m is None:
        return None
    return m.group(1)


def iter_blocks(buffer: str, tag: str) -> list[str]:
    """All `<tag>...</tag>` inner blocks, in document order."""
    if not isinstance(buffer, str) or not tag:
        return []
    return [m.group(1) for m in _block_re(tag).finditer(buffer)]
