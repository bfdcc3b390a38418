"""
Импорт рецепта по ссылке: загрузка страницы -> извлечение -> проверка -> сохранение
"""

import logging
from typing import Optional, Protocol

from config.config import config
from src.common.errors import IncompleteRecipe
from src.models.recipe import RecipeSource, ScrapedRecipe
from src.stages.extract.recipe_extractor import RecipeExtractor
from src.stages.parse.page_fetcher import PageFetcher

logger = logging.getLogger(__name__)


class RecipeStore(Protocol):
    """Хранилище рецептов (реализуется снаружи)"""

    def save(self, recipe: ScrapedRecipe) -> object:
        ...


class RecipeScraper:
    """Импорт рецептов со сторонних сайтов. Состояние между вызовами не хранится"""

    def __init__(self, fetcher: Optional[PageFetcher] = None, extractor: Optional[RecipeExtractor] = None,
                 store: Optional[RecipeStore] = None, min_title_length: Optional[int] = None):
        self.fetcher = fetcher or PageFetcher()
        self.extractor = extractor or RecipeExtractor()
        self.store = store
        self.min_title_length = (
            min_title_length if min_title_length is not None else config.SCRAPER_MIN_TITLE_LENGTH
        )

    def validate(self, recipe: ScrapedRecipe) -> None:
        """
        Проверка рецепта перед сохранением

        Raises:
            IncompleteRecipe: короткое название, нет ингредиентов или шагов
        """
        title = recipe.title.strip()
        if len(title) < self.min_title_length:
            raise IncompleteRecipe(f"название '{title}' короче {self.min_title_length} символов")
        if not recipe.ingredients:
            raise IncompleteRecipe("нет ингредиентов")
        if not recipe.steps:
            raise IncompleteRecipe("нет шагов приготовления")

    def scrape_html(self, html: str, url: Optional[str] = None) -> ScrapedRecipe:
        """
        Извлечение рецепта из уже загруженной страницы

        Args:
            html: HTML код страницы
            url: адрес страницы (источник рецепта и база для относительных ссылок)

        Raises:
            ExtractionFailed, IncompleteRecipe
        """
        recipe = self.extractor.extract(html, base_url=url)
        recipe.source = RecipeSource(type='scraped', url=url)
        self.validate(recipe)

        if self.store is not None:
            self.store.save(recipe)
            logger.info(f"Рецепт '{recipe.title}' передан в хранилище")

        return recipe

    def scrape(self, url: str) -> ScrapedRecipe:
        """
        Импорт рецепта по ссылке

        Raises:
            TransportFailure: страница не загружена (сайт недоступен, таймаут, неверный URL)
            ExtractionFailed: рецепт на странице не найден
            IncompleteRecipe: рецепт не прошел проверку
        """
        url = self.fetcher.validate_url(url)
        logger.info(f"Загрузка рецепта: {url}")
        html = self.fetcher.fetch(url)
        return self.scrape_html(html, url=url)
