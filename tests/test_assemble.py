from __future__ import annotations

import dataclasses
import unittest
from datetime import timezone
from zoneinfo import ZoneInfo

from moments_decoder.assemble import decode_post
from moments_decoder.errors import DecodeError
from moments_decoder.post import ArticleBody, FinderBody, MediaBody, TextBody


def _payload(
    *,
    type_code: str = "1",
    media: str = "",
    extra: str = "",
    location: str = "",
    create_time: str = "1700000000",
) -> str:
    return (
        "<TimelineObject>"
        "<id>13912345678901234567</id>"
        "<username>wxid_alice</username>"
        "<nickname>Alice</nickname>"
        f"<createTime>{create_time}</createTime>"
        "<contentDesc>  Sunny day  </contentDesc>"
        f"{location}"
        f"<ContentObject><type>{type_code}</type>{extra}"
        f"<mediaList>{media}</mediaList></ContentObject>"
        "</TimelineObject>"
    )


_TWO_IMAGES = (
    '<media><id>1</id><url type="1">http://img/1.jpg</url>'
    '<size width="1080" height="1440"></size></media>'
    '<media><id>2</id><url type="1">http://img/2.jpg</url></media>'
)


class TestDecodePost(unittest.TestCase):
    def test_image_post(self) -> None:
        post = decode_post(_payload(media=_TWO_IMAGES), tz=timezone.utc)

        self.assertEqual(post.tid, 13912345678901234567)
        self.assertEqual(post.user_name, "wxid_alice")
        self.assertEqual(post.nickname, "Alice")
        self.assertEqual(post.create_time, 1700000000)
        self.assertEqual(post.create_time_str, "2023-11-14 22:13:20")
        self.assertEqual(post.content_desc, "Sunny day")
        self.assertEqual(post.content_type, "image")
        self.assertIsInstance(post.body, MediaBody)
        self.assertEqual([m.url for m in post.media_list], ["http://img/1.jpg", "http://img/2.jpg"])
        self.assertIsNone(post.article)
        self.assertIsNone(post.finder_feed)
        self.assertIsNone(post.location)

    def test_display_zone(self) -> None:
        post = decode_post(_payload(), tz=ZoneInfo("Asia/Shanghai"))
        self.assertEqual(post.create_time_str, "2023-11-15 06:13:20")

    def test_bad_or_missing_create_time(self) -> None:
        for value in ("", "yesterday", "99999999999999999999"):
            with self.subTest(value=value):
                post = decode_post(_payload(create_time=value), tz=timezone.utc)
                self.assertEqual(post.create_time, 0)
                self.assertEqual(post.create_time_str, "")

    def test_video_post_keeps_location(self) -> None:
        media = "<media><url>http://v/1.mp4</url><videoDuration>8</videoDuration></media>"
        location = '<location city="Hangzhou" poiName="West Lake"></location>'
        post = decode_post(_payload(type_code="15", media=media, location=location))

        self.assertEqual(post.content_type, "video")
        self.assertEqual(post.media_list[0].duration, "8.00秒")
        assert post.location is not None
        self.assertEqual(post.location.poi_name, "West Lake")

    def test_article_category_without_article(self) -> None:
        extra = "<description>No title and no link</description>"
        post = decode_post(_payload(type_code="3", extra=extra))

        self.assertEqual(post.content_type, "article")
        self.assertIsInstance(post.body, ArticleBody)
        self.assertIsNone(post.article)
        self.assertEqual(post.media_list, ())

    def test_finder_category_without_feed(self) -> None:
        post = decode_post(_payload(type_code="28"))
        self.assertEqual(post.content_type, "finder")
        self.assertIsInstance(post.body, FinderBody)
        self.assertIsNone(post.finder_feed)

    def test_finder_post(self) -> None:
        extra = (
            "<finderFeed><nickname>Coach</nickname><desc>Drills</desc>"
            "<media><videoPlayDuration>305</videoPlayDuration></media></finderFeed>"
        )
        post = decode_post(_payload(type_code="28", extra=extra))
        assert post.finder_feed is not None
        self.assertEqual(post.finder_feed.nickname, "Coach")
        self.assertEqual(post.finder_feed.duration, "30秒")

    def test_unknown_type_is_text_without_media(self) -> None:
        post = decode_post(_payload(type_code="99", media=_TWO_IMAGES))
        self.assertEqual(post.content_type, "text")
        self.assertIsInstance(post.body, TextBody)
        self.assertEqual(post.media_list, ())

    def test_garbage_still_decodes(self) -> None:
        post = decode_post("definitely not a payload")
        self.assertEqual(post.tid, 0)
        self.assertEqual(post.user_name, "")
        self.assertEqual(post.create_time_str, "")
        self.assertEqual(post.content_type, "text")
        self.assertIsNone(post.location)
        self.assertEqual(post.raw, "definitely not a payload")

    def test_id_uses_ascii_digits_only(self) -> None:
        self.assertEqual(decode_post("<id>１２</id>").tid, 0)
        self.assertEqual(decode_post("<id>oops</id>").tid, 0)
        self.assertEqual(decode_post("<id> 12 </id>").tid, 12)

    def test_bytes_payload(self) -> None:
        post = decode_post(_payload().encode("utf-8"), tz=timezone.utc)
        self.assertEqual(post.nickname, "Alice")

    def test_non_text_payload_raises(self) -> None:
        with self.assertRaises(DecodeError):
            decode_post(12345)  # type: ignore[arg-type]

    def test_post_is_immutable_and_keeps_raw(self) -> None:
        raw = _payload(media=_TWO_IMAGES)
        post = decode_post(raw)
        self.assertEqual(post.raw, raw)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            post.nickname = "Bob"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
