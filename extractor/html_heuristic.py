"""
Экстрактор рецептов по структуре HTML, если разметки schema.org нет
Ищет элементы с классами/атрибутами вида "recipe", "ingredient", "instruction", "step"
"""

from typing import Optional

from extractor.base import BaseRecipeExtractor
from src.models.recipe import IntermediateRecipe

TITLE_SELECTORS = (
    'h1[class*="recipe"], h1[id*="recipe"]',
    'h1[class*="title"], h1[id*="title"]',
    'h1',
)

INGREDIENT_SELECTORS = (
    'li[class*="ingredient"], .ingredient, [itemprop="recipeIngredient"]',
)

INSTRUCTION_SELECTORS = (
    'li[class*="instruction"], li[class*="step"], .instruction, .step, '
    '[itemprop="recipeInstructions"] li, ol[class*="instructions"] li',
)

# (селектор, атрибут)
IMAGE_SOURCES = (
    ('img[class*="recipe"]', 'src'),
    ('meta[property="og:image"]', 'content'),
    ('img[itemprop="image"]', 'src'),
)

# Текст сохраняется, только если он длиннее порога
MIN_INGREDIENT_LENGTH = 2
MIN_INSTRUCTION_LENGTH = 10


class HtmlHeuristicExtractor(BaseRecipeExtractor):
    """Экстрактор по общепринятым классам и атрибутам разметки рецептов"""

    name = "html_heuristic"

    def extract_dish_name(self) -> str:
        """Извлечение названия: h1 с подсказками в классе/id, первый h1, затем <title> до "|" """
        for selector in TITLE_SELECTORS:
            title = self.select_text(selector)
            if title:
                return title
        return self.page_title('|')

    def extract_ingredients(self) -> list[str]:
        """Извлечение ингредиентов"""
        return self.select_texts(INGREDIENT_SELECTORS, MIN_INGREDIENT_LENGTH)

    def extract_steps(self) -> list[str]:
        """Извлечение шагов приготовления"""
        return self.select_texts(INSTRUCTION_SELECTORS, MIN_INSTRUCTION_LENGTH)

    def extract_image(self) -> Optional[str]:
        """Изображение рецепта, затем og:image, затем itemprop="image" """
        for selector, attr in IMAGE_SOURCES:
            url = self.select_attr(selector, attr)
            if url:
                return self.resolve_url(url)
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
