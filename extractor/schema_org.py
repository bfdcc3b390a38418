"""
Экстрактор рецептов из разметки schema.org (JSON-LD, <script type="application/ld+json">)
Самый надежный способ, большинство сайтов рецептов используют эту разметку
"""

import json
import logging
from typing import Any, Iterator, Optional

from extractor.base import BaseRecipeExtractor
from src.models.recipe import IntermediateRecipe

logger = logging.getLogger(__name__)

# Короткие фрагменты инструкций, заданных одной строкой, считаются шумом
MIN_INSTRUCTION_LINE_LENGTH = 10

# Альтернативные поля с шагами, если recipeInstructions пустой
ALTERNATIVE_INSTRUCTION_FIELDS = ('step', 'instructions', 'directions')


def is_recipe(item: Any) -> bool:
    """Проверка типа Recipe (@type может быть строкой или списком)"""
    if not isinstance(item, dict):
        return False
    item_type = item.get('@type', '')
    if isinstance(item_type, list):
        return 'Recipe' in item_type
    return item_type == 'Recipe'


def iter_block_items(data: Any) -> Iterator[dict]:
    """
    Объекты верхнего уровня блока JSON-LD

    Блок может быть одним объектом или массивом объектов
    """
    items = data if isinstance(data, list) else [data]
    for item in items:
        if isinstance(item, dict):
            yield item


def find_recipe_in_item(item: dict) -> Optional[dict]:
    """
    Поиск Recipe в объекте: сам объект (@type строка или список), затем коллекция @graph
    """
    if is_recipe(item):
        return item

    graph = item.get('@graph')
    if graph is None:
        return None
    if isinstance(graph, dict):
        graph = [graph]
    if isinstance(graph, list):
        for graph_item in graph:
            if is_recipe(graph_item):
                return graph_item
    return None


def find_recipe(data: Any) -> Optional[dict]:
    """Первый Recipe в распарсенном блоке JSON-LD"""
    for item in iter_block_items(data):
        recipe = find_recipe_in_item(item)
        if recipe is not None:
            return recipe
    return None


def _as_list(value: Any) -> list:
    """Скаляр превращается в список из одного элемента"""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class SchemaOrgExtractor(BaseRecipeExtractor):
    """Экстрактор для разметки schema.org Recipe"""

    name = "schema_org"

    def find_recipe_data(self) -> Optional[dict]:
        """
        Ищет первый объект Recipe во всех блоках JSON-LD

        Блоки с невалидным JSON пропускаются, поиск останавливается на первом найденном Recipe
        """
        json_ld_scripts = self.soup.find_all('script', type='application/ld+json')

        for index, script in enumerate(json_ld_scripts):
            content = script.string or script.get_text()
            if not content or not content.strip():
                continue
            try:
                data = json.loads(content)
            except json.JSONDecodeError as e:
                logger.debug(f"Пропускаем невалидный JSON-LD блок #{index}: {e}")
                continue

            recipe = find_recipe(data)
            if recipe is not None:
                return recipe

        return None

    def _text_list(self, values: list) -> list[str]:
        """Строки списка после очистки, пустые и не-строковые значения пропускаются"""
        texts = []
        for value in values:
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                value = str(value)
            if not isinstance(value, str):
                continue
            text = self.clean_text(value)
            if text:
                texts.append(text)
        return texts

    def extract_ingredients(self, recipe: dict) -> list[str]:
        """Извлечение ингредиентов (массив строк или одна строка)"""
        ingredients = recipe.get('recipeIngredient')
        if ingredients is None:
            # устаревшее поле schema.org
            ingredients = recipe.get('ingredients')
        return self._text_list(_as_list(ingredients))

    def _step_texts(self, steps: list) -> list[str]:
        """Шаги из массива строк, HowToStep (text, затем name) и HowToSection"""
        texts = []
        for step in steps:
            if isinstance(step, str):
                texts.extend(self._text_list([step]))
            elif isinstance(step, dict):
                if isinstance(step.get('itemListElement'), list):
                    # HowToSection - раскрываем вложенные шаги
                    texts.extend(self._step_texts(step['itemListElement']))
                    continue
                text = step.get('text') or step.get('name')
                texts.extend(self._text_list([text]))
        return texts

    def extract_steps(self, recipe: dict) -> list[str]:
        """Извлечение шагов приготовления"""
        instructions = recipe.get('recipeInstructions')
        steps: list[str] = []

        if isinstance(instructions, list):
            steps = self._step_texts(instructions)
        elif isinstance(instructions, str):
            # Одна строка - делим по переводам строк, короткие куски отбрасываем
            for line in instructions.split('\n'):
                line = line.strip()
                if len(line) <= MIN_INSTRUCTION_LINE_LENGTH:
                    continue
                text = self.clean_text(line)
                if text:
                    steps.append(text)
        elif isinstance(instructions, dict):
            steps = self._step_texts([instructions])

        if steps:
            return steps

        # Если в recipeInstructions ничего нет, пробуем альтернативные поля
        for field in ALTERNATIVE_INSTRUCTION_FIELDS:
            value = recipe.get(field)
            if not value:
                continue
            steps = self._step_texts(_as_list(value))
            if steps:
                return steps

        return []

    def extract_image(self, recipe: dict) -> Optional[str]:
        """Изображение: строка, массив (url первого элемента или сам элемент) или объект с url"""
        image = recipe.get('image')
        url = None
        if isinstance(image, str):
            url = image
        elif isinstance(image, list) and image:
            first = image[0]
            if isinstance(first, dict):
                url = first.get('url')
            elif isinstance(first, str):
                url = first
        elif isinstance(image, dict):
            url = image.get('url')
        return self.resolve_url(url) if isinstance(url, str) else None

    @staticmethod
    def extract_servings(recipe: dict) -> Optional[str]:
        """recipeYield в виде строки"""
        value = recipe.get('recipeYield')
        if value is None or value == '' or value == []:
            return None
        if isinstance(value, list):
            return ', '.join(str(v) for v in value)
        return str(value)

    @staticmethod
    def _optional_str(recipe: dict, field: str) -> Optional[str]:
        value = recipe.get(field)
        return value if isinstance(value, str) and value else None

    def extract_dish_name(self, recipe: dict) -> str:
        """Извлечение названия блюда"""
        name = recipe.get('name')
        if not isinstance(name, str):
            return ''
        return self.clean_text(name) or ''

    def extract(self) -> Optional[IntermediateRecipe]:
        recipe = self.find_recipe_data()
        if recipe is None:
            return None

        return self.make_result(IntermediateRecipe(
            name=self.extract_dish_name(recipe),
            ingredients=self.extract_ingredients(recipe),
            instructions=self.extract_steps(recipe),
            image=self.extract_image(recipe),
            servings=self.extract_servings(recipe),
            prep_time=self._optional_str(recipe, 'prepTime'),
            cook_time=self._optional_str(recipe, 'cookTime'),
            total_time=self._optional_str(recipe, 'totalTime'),
        ))
