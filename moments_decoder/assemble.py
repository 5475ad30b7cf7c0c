from __future__ import annotations

from datetime import datetime, tzinfo

from .article import decode_article
from .category import classify_category
from .coerce import parse_int, parse_int_or
from .errors import DecodeError
from .finder import decode_finder_feed
from .location import decode_location
from .media import decode_image_media, decode_video_media
from .post import ArticleBody, FinderBody, MediaBody, Post, PostBody, TextBody
from .tags import extract_tag_text

CREATE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _as_text(payload: str | bytes) -> str:
    if isinstance(payload, str):
        return payload
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8", errors="replace")
    raise DecodeError(f"Payload must be text, got {type(payload).__name__}")


def _create_time(buffer: str, tz: tzinfo | None) -> tuple[int, str]:
    seconds = parse_int(extract_tag_text(buffer, "createTime"))
    if seconds is None:
        return 0, ""
    try:
        moment = datetime.fromtimestamp(seconds, tz)
    except (OverflowError, OSError, ValueError):
        return 0, ""
    return seconds, moment.strftime(CREATE_TIME_FORMAT)


def _body(buffer: str) -> PostBody:
    category = classify_category(buffer)

    if category == "image":
        return MediaBody(kind="image", media=tuple(decode_image_media(buffer)))
    if category == "video":
        return MediaBody(kind="video", media=tuple(decode_video_media(buffer)))
    if category == "article":
        return ArticleBody(article=decode_article(buffer))
    if category == "finder":
        return FinderBody(feed=decode_finder_feed(buffer))
    return TextBody()


def decode_post(payload: str | bytes, *, tz: tzinfo | None = None) -> Post:
    """
    Decode one raw timeline payload into a Post.

    Decoding is best-effort: missing or malformed tags leave empty or zero
    fields, never an exception. `tz` selects the zone used for
    `create_time_str` (None formats in host local time). Only a non-text
    payload raises DecodeError.
    """
    buffer = _as_text(payload)
    create_time, create_time_str = _create_time(buffer, tz)

    return Post(
        tid=parse_int_or(extract_tag_text(buffer, "id")),
        user_name=extract_tag_text(buffer, "username"),
        nickname=extract_tag_text(buffer, "nickname"),
        create_time=create_time,
        create_time_str=create_time_str,
        content_desc=extract_tag_text(buffer, "contentDesc"),
        location=decode_location(buffer),
        body=_body(buffer),
        raw=buffer,
    )
