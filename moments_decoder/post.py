from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Sequence

from .category import Category


@dataclass(frozen=True)
class Location:
    """Where a post was published. Only built when a city or POI name exists."""

    city: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    poi_name: str = ""
    poi_address: str = ""


@dataclass(frozen=True)
class MediaItem:
    type: Literal["image", "video"]
    url: str = ""
    thumb_url: str = ""
    width: int = 0
    height: int = 0
    duration: str = ""


@dataclass(frozen=True)
class Article:
    title: str = ""
    description: str = ""
    url: str = ""
    cover_url: str = ""


@dataclass(frozen=True)
class FinderFeed:
    """A short-video ("Channels") item embedded in a post."""

    nickname: str
    avatar: str = ""
    desc: str = ""
    media_count: int = 0
    video_url: str = ""
    cover_url: str = ""
    thumb_url: str = ""
    width: int = 0
    height: int = 0
    duration: str = ""


# One body per post. The body's kind is the post category; article and finder
# bodies may still hold None when the payload lacked enough evidence.


@dataclass(frozen=True)
class TextBody:
    kind: Literal["text"] = "text"


@dataclass(frozen=True)
class MediaBody:
    kind: Literal["image", "video"]
    media: Sequence[MediaItem] = ()


@dataclass(frozen=True)
class ArticleBody:
    article: Article | None = None
    kind: Literal["article"] = "article"


@dataclass(frozen=True)
class FinderBody:
    feed: FinderFeed | None = None
    kind: Literal["finder"] = "finder"


PostBody = TextBody | MediaBody | ArticleBody | FinderBody


@dataclass(frozen=True)
class Post:
    """A single decoded timeline update."""

    tid: int = 0
    user_name: str = ""
    nickname: str = ""
    create_time: int = 0
    create_time_str: str = ""
    content_desc: str = ""
    location: Location | None = None
    body: PostBody = field(default_factory=TextBody)
    raw: str = field(default="", repr=False)

    @property
    def content_type(self) -> Category:
        return self.body.kind

    @property
    def media_list(self) -> Sequence[MediaItem]:
        if isinstance(self.body, MediaBody):
            return self.body.media
        return ()

    @property
    def article(self) -> Article | None:
        if isinstance(self.body, ArticleBody):
            return self.body.article
        return None

    @property
    def finder_feed(self) -> FinderFeed | None:
        if isinstance(self.body, FinderBody):
            return self.body.feed
        return None
