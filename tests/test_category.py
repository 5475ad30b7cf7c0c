from __future__ import annotations

import unittest

from moments_decoder.category import CATEGORY_CODES, category_from_code, classify_category


class TestCategory(unittest.TestCase):
    def test_closed_table(self) -> None:
        expected = {
            1: "image",
            7: "image",
            6: "video",
            15: "video",
            3: "article",
            28: "finder",
        }
        self.assertEqual(dict(CATEGORY_CODES), expected)
        for code, category in expected.items():
            self.assertEqual(category_from_code(code), category)

    def test_unknown_codes_are_text(self) -> None:
        for code in (None, 0, 2, 4, 5, 8, 27, 29, 99, -1):
            with self.subTest(code=code):
                self.assertEqual(category_from_code(code), "text")

    def test_classify_reads_first_type_tag(self) -> None:
        xml = "<ContentObject><type>15</type><media><type>2</type></media></ContentObject>"
        self.assertEqual(classify_category(xml), "video")

    def test_classify_absent_or_unparsable(self) -> None:
        self.assertEqual(classify_category("<a></a>"), "text")
        self.assertEqual(classify_category("<type>abc</type>"), "text")
        self.assertEqual(classify_category("<type></type>"), "text")
        self.assertEqual(classify_category("<type> 28 </type>"), "finder")

    def test_non_ascii_digits_are_text(self) -> None:
        self.assertEqual(classify_category("<type>１</type><media><url>u</url></media>"), "text")
        self.assertEqual(classify_category("<type>٦</type>"), "text")


if __name__ == "__main__":
    unittest.main()
