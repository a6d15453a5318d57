import unittest
from datetime import datetime, timezone

from coinnews.dedupe import dedupe_by_title, title_key
from coinnews.normalizer import extract_items, to_article, transform_batch
from coinnews.tests.helpers import payload, raw_article


class TitleKeyTests(unittest.TestCase):
    def test_normalizes_case_punctuation_and_whitespace(self):
        self.assertEqual(title_key("  Bitcoin,  ETF   Approved!! "), "bitcoin etf approved")

    def test_truncates_to_fifty_characters(self):
        title = "Ethereum developers confirm the date for the next network upgrade on mainnet"
        self.assertEqual(len(title_key(title)), 50)

    def test_shared_long_prefix_counts_as_duplicate(self):
        prefix = "Analysts say the crypto market could rally strongly "
        items = [
            {"title": prefix + "this week"},
            {"title": prefix + "next quarter"},
        ]
        self.assertEqual(dedupe_by_title(items), [items[0]])

    def test_first_occurrence_wins_and_order_is_kept(self):
        items = [
            {"title": "Solana outage resolved", "id": 1},
            {"title": "XRP lawsuit update", "id": 2},
            {"title": "SOLANA: outage resolved.", "id": 3},
        ]
        self.assertEqual([i["id"] for i in dedupe_by_title(items)], [1, 2])


class NormalizerTests(unittest.TestCase):
    def test_maps_source_fields(self):
        article = to_article(raw_article(1, published_on=1_700_000_000))

        self.assertEqual(article.id, "1001")
        self.assertEqual(article.source, "CoinTelegraph")
        self.assertEqual(article.published_at, datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc))
        self.assertEqual(article.image_url, "https://example.com/img/1.png")
        self.assertEqual(article.categories, frozenset({"BTC", "Market"}))
        self.assertEqual(article.tags, frozenset({"Bitcoin", "Trading"}))

    def test_long_body_is_truncated_with_ellipsis(self):
        article = to_article(raw_article(1, body="x" * 250), preview_chars=200)
        self.assertEqual(article.body_snippet, "x" * 200 + "...")

    def test_short_body_is_kept(self):
        article = to_article(raw_article(1, body="short"))
        self.assertEqual(article.body_snippet, "short")

    def test_missing_optional_fields_default_to_absent(self):
        raw = {"id": 7, "title": "Bare item", "url": "https://example.com/7", "source": "wire"}
        article = to_article(raw)

        self.assertIsNone(article.body_snippet)
        self.assertIsNone(article.published_at)
        self.assertIsNone(article.image_url)
        self.assertEqual(article.source, "wire")
        self.assertEqual(article.categories, frozenset())
        self.assertEqual(article.tags, frozenset())

    def test_to_dict_is_serializable(self):
        data = to_article(raw_article(2)).to_dict()
        self.assertEqual(data["categories"], ["BTC", "Market"])
        self.assertTrue(data["publishedAt"].endswith("+00:00"))

    def test_extract_items_tolerates_bad_payloads(self):
        self.assertEqual(extract_items({}), [])
        self.assertEqual(extract_items({"Data": {}}), [])
        self.assertEqual(extract_items(["not", "a", "mapping"]), [])
        items = extract_items(payload([raw_article(1), "junk", {"title": "  "}, raw_article(2)]))
        self.assertEqual([i["id"] for i in items], ["1001", "1002"])

    def test_transform_batch_dedupes_then_truncates(self):
        body = payload(
            [
                raw_article(0, title="Same story"),
                raw_article(1, title="same story!"),
                raw_article(2),
                raw_article(3),
            ]
        )
        articles = transform_batch(body, 2)
        self.assertEqual([a.id for a in articles], ["1000", "1002"])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
