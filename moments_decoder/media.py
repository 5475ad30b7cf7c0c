from __future__ import annotations

from .coerce import parse_float, parse_int_or
from .post import MediaItem
from .tags import extract_attr, extract_tag_text, iter_blocks

SECONDS_UNIT = "秒"


def _size(block: str) -> tuple[int, int]:
    width = parse_int_or(extract_attr(block, "size", "width"))
    height = parse_int_or(extract_attr(block, "size", "height"))
    return width, height


def format_video_duration(text: str) -> str:
    """`"12.5"` -> `"12.50秒"`; unusable input gives "" rather than a zero duration."""
    seconds = parse_float(text)
    if seconds is None:
        return ""
    return f"{seconds:.2f}{SECONDS_UNIT}"


def decode_image_media(buffer: str) -> list[MediaItem]:
    out: list[MediaItem] = []
    for block in iter_blocks(buffer, "media"):
        url = extract_tag_text(block, "url") or extract_tag_text(block, "thumb")
        width, height = _size(block)
        out.append(MediaItem(type="image", url=url, width=width, height=height))
    return out


def decode_video_media(buffer: str) -> list[MediaItem]:
    out: list[MediaItem] = []
    for block in iter_blocks(buffer, "media"):
        width, height = _size(block)
        out.append(
            MediaItem(
                type="video",
                url=extract_tag_text(block, "url"),
                thumb_url=extract_tag_text(block, "thumb"),
                width=width,
                height=height,
                duration=format_video_duration(extract_tag_text(block, "videoDuration")),
            )
        )
    return out
