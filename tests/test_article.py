from __future__ import annotations

import unittest

from moments_decoder.article import decode_article


class TestDecodeArticle(unittest.TestCase):
    def test_reads_article(self) -> None:
        xml = (
            "<ContentObject><type>3</type><title>Ten bodyweight drills</title>"
            "<description>A short guide</description>"
            "<contentUrl>http://mp.example.com/s?id=1&amp;x=2</contentUrl>"
            "<mediaList><media><url>http://img/big.jpg</url>"
            "<thumb>http://img/small.jpg</thumb></media>"
            "<media><thumb>http://img/second.jpg</thumb></media></mediaList>"
            "</ContentObject>"
        )
        article = decode_article(xml)
        self.assertIsNotNone(article)
        assert article is not None

        self.assertEqual(article.title, "Ten bodyweight drills")
        self.assertEqual(article.description, "A short guide")
        self.assertEqual(article.url, "http://mp.example.com/s?id=1&x=2")
        self.assertEqual(article.cover_url, "http://img/small.jpg")

    def test_cover_falls_back_to_first_media_url(self) -> None:
        xml = (
            "<title>T</title><media><url>http://img/first.jpg</url></media>"
            "<media><thumb>http://img/second.jpg</thumb></media>"
        )
        article = decode_article(xml)
        assert article is not None
        self.assertEqual(article.cover_url, "http://img/first.jpg")

    def test_url_alone_is_enough(self) -> None:
        article = decode_article("<contentUrl>http://a</contentUrl>")
        assert article is not None
        self.assertEqual(article.title, "")
        self.assertEqual(article.cover_url, "")

    def test_description_without_title_or_url_is_dropped(self) -> None:
        xml = (
            "<description>Only a description</description>"
            "<media><thumb>http://img/t.jpg</thumb></media>"
        )
        self.assertIsNone(decode_article(xml))


if __name__ == "__main__":
    unittest.main()
