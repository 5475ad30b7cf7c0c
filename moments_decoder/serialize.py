from __future__ import annotations

import json
from typing import Any

from .post import Article, FinderFeed, Location, MediaItem, Post

RAW_FIELD = "xml_content"


def _put_if(out: dict[str, Any], key: str, value: Any) -> None:
    if value:
        out[key] = value


def _location_dict(location: Location) -> dict[str, Any]:
    out: dict[str, Any] = {}
    _put_if(out, "city", location.city)
    _put_if(out, "latitude", location.latitude)
    _put_if(out, "longitude", location.longitude)
    _put_if(out, "poi_name", location.poi_name)
    _put_if(out, "poi_address", location.poi_address)
    return out


def _media_dict(media: MediaItem) -> dict[str, Any]:
    out: dict[str, Any] = {"type": media.type}
    _put_if(out, "url", media.url)
    _put_if(out, "thumb_url", media.thumb_url)
    _put_if(out, "width", media.width)
    _put_if(out, "height", media.height)
    _put_if(out, "duration", media.duration)
    return out


def _article_dict(article: Article) -> dict[str, Any]:
    return {
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "cover_url": article.cover_url,
    }


def _finder_dict(feed: FinderFeed) -> dict[str, Any]:
    out: dict[str, Any] = {
        "nickname": feed.nickname,
        "avatar": feed.avatar,
        "desc": feed.desc,
        "media_count": feed.media_count,
        "video_url": feed.video_url,
        "cover_url": feed.cover_url,
        "thumb_url": feed.thumb_url,
    }
    _put_if(out, "width", feed.width)
    _put_if(out, "height", feed.height)
    _put_if(out, "duration", feed.duration)
    return out


def post_to_dict(post: Post, *, include_raw: bool = False) -> dict[str, Any]:
    """
    Project a post onto the stable wire field names.

    Absent structures and an empty media list are left out entirely; the raw
    payload echo is only added when asked for.
    """
    out: dict[str, Any] = {
        "tid": post.tid,
        "user_name": post.user_name,
        "nickname": post.nickname,
        "create_time": post.create_time,
        "create_time_str": post.create_time_str,
        "content_desc": post.content_desc,
        "content_type": post.content_type,
    }

    if post.location is not None:
        out["location"] = _location_dict(post.location)
    if post.media_list:
        out["media_list"] = [_media_dict(m) for m in post.media_list]
    if post.article is not None:
        out["article"] = _article_dict(post.article)
    if post.finder_feed is not None:
        out["finder_feed"] = _finder_dict(post.finder_feed)

    if include_raw and post.raw:
        out[RAW_FIELD] = post.raw

    return out


def serialize_post(post: Post, *, indent: int | None = 2, include_raw: bool = False) -> str:
    """JSON text for a post; identical posts always produce identical output."""
    return json.dumps(
        post_to_dict(post, include_raw=include_raw),
        ensure_ascii=False,
        indent=indent,
        separators=None if indent is not None else (",", ":"),
    )
