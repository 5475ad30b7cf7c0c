from __future__ import annotations

from .coerce import parse_int, parse_int_or, truncate_div
from .media import SECONDS_UNIT
from .post import FinderFeed
from .tags import extract_attr, extract_block, extract_tag_text

# videoPlayDuration is reported in tenths of a second.
_PLAY_DURATION_UNITS_PER_SECOND = 10


def format_play_duration(text: str) -> str:
    """`"125"` -> `"12秒"`: sub-second precision is dropped, never rounded."""
    tenths = parse_int(text)
    if tenths is None:
        return ""
    seconds = truncate_div(tenths, _PLAY_DURATION_UNITS_PER_SECOND)
    return f"{seconds}{SECONDS_UNIT}"


def decode_finder_feed(buffer: str) -> FinderFeed | None:
    """Decode the `<finderFeed>` block; a feed without a nickname is dropped."""
    feed_xml = extract_block(buffer, "finderFeed")
    if feed_xml is None:
        return None

    nickname = extract_tag_text(feed_xml, "nickname")
    if not nickname:
        return None

    video_url = thumb_url = cover_url = duration = ""
    width = height = 0

    media_xml = extract_block(feed_xml, "media")
    if media_xml is not None:
        video_url = extract_tag_text(media_xml, "url")
        thumb_url = extract_tag_text(media_xml, "thumbUrl")
        cover_url = extract_tag_text(media_xml, "coverUrl")
        width = parse_int_or(extract_attr(media_xml, "size", "width"))
        height = parse_int_or(extract_attr(media_xml, "size", "height"))
        duration = format_play_duration(extract_tag_text(media_xml, "videoPlayDuration"))

    return FinderFeed(
        nickname=nickname,
        avatar=extract_tag_text(feed_xml, "avatar"),
        desc=extract_tag_text(feed_xml, "desc"),
        media_count=parse_int_or(extract_tag_text(feed_xml, "mediaCount")),
        video_url=video_url,
        cover_url=cover_url,
        thumb_url=thumb_url,
        width=width,
        height=height,
        duration=duration,
    )
