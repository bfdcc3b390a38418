"""
Агрессивный экстрактор - последний вариант, когда остальные стратегии ничего не нашли
Расширенный набор селекторов (включая общие списки), дубликаты текста отбрасываются
"""

from typing import Optional

from extractor.base import BaseRecipeExtractor
from extractor.html_heuristic import MIN_INGREDIENT_LENGTH, MIN_INSTRUCTION_LENGTH
from src.models.recipe import IntermediateRecipe
from utils.html import is_absolute_http_url

TITLE_SELECTORS = (
    'h1',
    'h2',
    '.recipe-title',
    '.post-title',
)

INGREDIENT_SELECTORS = (
    'li[class*="ingredient"]',
    '.ingredient',
    '[itemprop="recipeIngredient"]',
    '.recipe-ingredients li',
    '.ingredients li',
    'ul.ingredients li',
    'ol.ingredients li',
    '.recipe-ingredient',
    '.ingredient-item',
)

INSTRUCTION_SELECTORS = (
    'li[class*="instruction"]',
    'li[class*="step"]',
    '.instruction',
    '.step',
    '[itemprop="recipeInstructions"] li',
    '.recipe-instructions li',
    '.instructions li',
    'ol.instructions li',
    '.recipe-step',
    '.cooking-step',
    '.directions li',
)

IMAGE_SELECTORS = (
    'img[class*="recipe"]',
    'meta[property="og:image"]',
    'img[itemprop="image"]',
    '.recipe-image img',
    '.post-image img',
    'img[alt*="recipe"]',
)


class AggressiveExtractor(BaseRecipeExtractor):
    """Экстрактор с широким набором селекторов"""

    name = "aggressive"

    def extract_dish_name(self) -> str:
        """Первый непустой заголовок, иначе <title> до "|" и "-" """
        for selector in TITLE_SELECTORS:
            title = self.select_text(selector)
            if title:
                return title
        return self.page_title('|', '-')

    def extract_ingredients(self) -> list[str]:
        """Извлечение ингредиентов без повторов, в порядке обнаружения"""
        return self.select_texts(INGREDIENT_SELECTORS, MIN_INGREDIENT_LENGTH, unique=True)

    def extract_steps(self) -> list[str]:
        """Извлечение шагов без повторов, в порядке обнаружения"""
        return self.select_texts(INSTRUCTION_SELECTORS, MIN_INSTRUCTION_LENGTH, unique=True)

    def extract_image(self) -> Optional[str]:
        """Первая абсолютная http(s) ссылка из src или content"""
        for selector in IMAGE_SELECTORS:
            url = self.select_attr(selector, 'src', 'content')
            if is_absolute_http_url(url):
                return url
        return None

    def extract(self) -> Optional[IntermediateRecipe]:
        name = self.extract_dish_name()
        if not name:
            return None

        return self.make_result(IntermediateRecipe(
            name=name,
            ingredients=self.extract_ingredients(),
            instructions=self.extract_steps(),
            image=self.extract_image(),
        ))
