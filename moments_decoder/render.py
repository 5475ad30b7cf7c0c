from __future__ import annotations

from .post import Location, Post


def _location_line(location: Location) -> str:
    if location.poi_name:
        if location.poi_address:
            return f"📍 {location.poi_name} ({location.poi_address})"
        return f"📍 {location.poi_name}"
    return f"📍 {location.city}"


def _summary_lines(post: Post) -> list[str]:
    kind = post.content_type

    if kind == "image":
        return [f"🖼️ 图片 ({len(post.media_list)}张)"]

    if kind == "video":
        media = post.media_list
        if media and media[0].duration:
            return [f"🎬 视频 ({media[0].duration})"]
        return ["🎬 视频"]

    if kind == "article":
        article = post.article
        if article is None:
            return []
        return [f"📰 文章: {article.title}", f"   {article.url}"]

    if kind == "finder":
        feed = post.finder_feed
        if feed is None:
            return []
        lines = [f"📺 视频号: {feed.nickname}"]
        if feed.desc:
            lines.append(f"   {feed.desc}")
        return lines

    return []


def render_post(post: Post) -> str:
    """Render a post as plain multi-line text, one newline-terminated line each."""
    lines = [f"📅 {post.create_time_str}"]

    if post.nickname:
        lines.append(f"👤 {post.nickname}")
    if post.content_desc:
        lines.append(f"💬 {post.content_desc}")
    if post.location is not None:
        lines.append(_location_line(post.location))

    lines.extend(_summary_lines(post))
    return "".join(line + "\n" for line in lines)
