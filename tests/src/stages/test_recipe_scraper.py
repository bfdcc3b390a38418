"""
Тесты для RecipeScraper: загрузка -> извлечение -> проверка -> сохранение
"""

import unittest
import sys
import json
from pathlib import Path
from unittest.mock import MagicMock

sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from src.common.errors import (
    ExtractionFailed, FetchTimeout, IncompleteRecipe, InvalidRecipeUrl, SiteUnreachable, user_message
)
from src.stages.parse.page_fetcher import PageFetcher
from src.stages.scrape.recipe_scraper import RecipeScraper

RECIPE_PAGE = """
<html><head><script type="application/ld+json">%s</script></head><body></body></html>
""" % json.dumps({
    "@type": "Recipe",
    "name": "Pesto",
    "image": "/pesto.jpg",
    "recipeIngredient": ["2 cups basil", "1/2 cup olive oil"],
    "recipeInstructions": "Blend the basil with the oil.\nSeason to taste with salt.",
})


def make_scraper(html=None, fetch_error=None, store=None, min_title_length=None):
    fetcher = MagicMock(spec=PageFetcher)
    fetcher.validate_url.side_effect = PageFetcher.validate_url
    if fetch_error is not None:
        fetcher.fetch.side_effect = fetch_error
    else:
        fetcher.fetch.return_value = html
    return RecipeScraper(fetcher=fetcher, store=store, min_title_length=min_title_length), fetcher


class TestRecipeScraper(unittest.TestCase):
    """Тесты для RecipeScraper"""

    def test_scrape_tags_source_and_saves(self):
        """Тест: рецепт помечается источником и передается в хранилище"""
        store = MagicMock()
        scraper, _ = make_scraper(RECIPE_PAGE, store=store)

        recipe = scraper.scrape("https://example.com/pesto")

        self.assertEqual(recipe.title, "Pesto")
        self.assertEqual(recipe.source.type, "scraped")
        self.assertEqual(recipe.source.url, "https://example.com/pesto")
        self.assertEqual(recipe.image_url, "https://example.com/pesto.jpg")
        self.assertEqual(len(recipe.steps), 2)
        store.save.assert_called_once_with(recipe)

    def test_record_for_store(self):
        scraper, _ = make_scraper(RECIPE_PAGE)
        record = scraper.scrape("https://example.com/pesto").to_record()

        self.assertEqual(record["source"], {"type": "scraped", "url": "https://example.com/pesto"})
        self.assertEqual(record["ingredients"][1], {"name": "olive oil", "amount": "1/2", "unit": "cup"})
        self.assertEqual(record["steps"][0], "Blend the basil with the oil.")
        self.assertEqual(record["imageUrl"], "https://example.com/pesto.jpg")

    def test_transport_failure_short_circuits(self):
        """Тест: ошибка загрузки не доходит до извлечения"""
        store = MagicMock()
        scraper, _ = make_scraper(fetch_error=FetchTimeout("https://example.com", 15), store=store)
        scraper.extractor = MagicMock()

        with self.assertRaises(FetchTimeout):
            scraper.scrape("https://example.com")

        scraper.extractor.extract.assert_not_called()
        store.save.assert_not_called()

    def test_invalid_url_rejected_before_fetch(self):
        scraper, fetcher = make_scraper(RECIPE_PAGE)
        with self.assertRaises(InvalidRecipeUrl):
            scraper.scrape("ftp://example.com/pesto")
        fetcher.fetch.assert_not_called()

    def test_extraction_failed(self):
        store = MagicMock()
        scraper, _ = make_scraper("<html><body><p>nothing here</p></body></html>", store=store)
        with self.assertRaises(ExtractionFailed):
            scraper.scrape("https://example.com/about")
        store.save.assert_not_called()

    def test_short_title_rejected(self):
        """Тест: проверка названия перед сохранением"""
        scraper, _ = make_scraper(RECIPE_PAGE, min_title_length=10)
        with self.assertRaises(IncompleteRecipe):
            scraper.scrape("https://example.com/pesto")

    def test_scrape_html_without_url(self):
        scraper, fetcher = make_scraper()
        recipe = scraper.scrape_html(RECIPE_PAGE)
        self.assertIsNone(recipe.source.url)
        self.assertEqual(recipe.image_url, "/pesto.jpg")
        fetcher.fetch.assert_not_called()

    def test_user_messages_distinguish_failures(self):
        """Тест: сообщения пользователю различают сетевые ошибки и отсутствие рецепта"""
        unreachable = user_message(SiteUnreachable("https://example.com"))
        timeout = user_message(FetchTimeout("https://example.com", 15))
        not_found = user_message(ExtractionFailed(["schema_org"]))

        self.assertEqual(len({unreachable, timeout, not_found}), 3)
        self.assertIn("timed out", timeout)
        self.assertIn("not be supported", not_found)


if __name__ == '__main__':
    unittest.main()
