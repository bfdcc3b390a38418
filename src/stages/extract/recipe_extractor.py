"""Извлечение рецепта из HTML: стратегии по порядку, первая пригодная побеждает"""
import logging
from typing import Optional, Sequence, Type

from bs4 import BeautifulSoup

from extractor.base import BaseRecipeExtractor
from extractor.schema_org import SchemaOrgExtractor
from extractor.html_heuristic import HtmlHeuristicExtractor
from extractor.aggressive import AggressiveExtractor
from src.common.errors import ExtractionFailed
from src.models.recipe import IntermediateRecipe, ScrapedRecipe
from utils.html import make_soup
from utils.normalization import normalize_ingredients_list, normalize_steps

logger = logging.getLogger(__name__)

# schema.org -> структура HTML -> агрессивный поиск
DEFAULT_STRATEGIES: tuple[Type[BaseRecipeExtractor], ...] = (
    SchemaOrgExtractor,
    HtmlHeuristicExtractor,
    AggressiveExtractor,
)


class RecipeExtractor:
    """Перебирает стратегии извлечения в строгом порядке приоритета"""

    def __init__(self, strategies: Optional[Sequence[Type[BaseRecipeExtractor]]] = None):
        self.strategies: tuple[Type[BaseRecipeExtractor], ...] = tuple(
            strategies if strategies is not None else DEFAULT_STRATEGIES
        )

    @staticmethod
    def _normalize(recipe: IntermediateRecipe) -> Optional[ScrapedRecipe]:
        """Нормализация сырых строк; None если ингредиенты или шаги пропали после очистки"""
        ingredients = normalize_ingredients_list(recipe.ingredients)
        steps = normalize_steps(recipe.instructions)
        if not ingredients or not steps:
            return None

        return ScrapedRecipe(
            title=recipe.name.strip(),
            ingredients=ingredients,
            steps=steps,
            image_url=recipe.image,
            servings=recipe.servings,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            total_time=recipe.total_time,
        )

    def extract(self, html: str | BeautifulSoup, base_url: Optional[str] = None) -> ScrapedRecipe:
        """
        Извлекает рецепт со страницы

        Args:
            html: HTML код страницы (или уже разобранный документ)
            base_url: URL страницы для разрешения относительных ссылок

        Returns:
            ScrapedRecipe с непустыми ингредиентами и шагами

        Raises:
            ExtractionFailed: ни одна стратегия не дала пригодный рецепт
        """
        soup = html if isinstance(html, BeautifulSoup) else make_soup(html)
        tried: list[str] = []

        for strategy_class in self.strategies:
            strategy = strategy_class(soup, base_url=base_url)
            tried.append(strategy.name)

            intermediate = strategy.extract()
            if intermediate is None or not intermediate.is_usable():
                logger.debug(f"Стратегия {strategy.name} не нашла рецепт")
                continue

            recipe = self._normalize(intermediate)
            if recipe is None:
                logger.debug(f"Стратегия {strategy.name}: после нормализации не осталось ингредиентов или шагов")
                continue

            logger.info(f"Рецепт '{recipe.title}' извлечен стратегией {strategy.name}")
            return recipe

        logger.info(f"Рецепт не найден, испробованы стратегии: {', '.join(tried)}")
        raise ExtractionFailed(tried)


def extract_recipe(html: str, base_url: Optional[str] = None) -> ScrapedRecipe:
    """Извлечение рецепта стратегиями по умолчанию"""
    return RecipeExtractor().extract(html, base_url=base_url)
