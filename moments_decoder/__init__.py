from __future__ import annotations

from .assemble import decode_post
from .category import CATEGORIES, Category, classify_category
from .config import display_tzinfo, load_config
from .config_schema import AppConfig
from .errors import ConfigError, DecodeError, InputError
from .post import Article, FinderFeed, Location, MediaItem, Post
from .render import render_post
from .serialize import post_to_dict, serialize_post

__all__ = [
    "AppConfig",
    "Article",
    "CATEGORIES",
    "Category",
    "ConfigError",
    "DecodeError",
    "FinderFeed",
    "InputError",
    "Location",
    "MediaItem",
    "Post",
    "classify_category",
    "decode_post",
    "display_tzinfo",
    "load_config",
    "post_to_dict",
    "render_post",
    "serialize_post",
]
