"""
базовый класс экстрактора данных рецептов
Все стратегии должны наследоваться от этого класса и реализовывать метод extract
Стратегия получает уже разобранную страницу и возвращает IntermediateRecipe или None, если рецепт не найден
Порядок стратегий задается в RecipeExtractor (src/stages/extract/recipe_extractor.py)
"""

import html
import re
from typing import Iterable, Optional, Union
from urllib.parse import urljoin
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup

from src.models.recipe import IntermediateRecipe
from utils.html import make_soup


class BaseRecipeExtractor(ABC):
    """базовый экстрактор данных рецептов"""

    # имя стратегии для логов и ExtractionFailed.tried
    name: str = "base"

    def __init__(self, page: Union[str, BeautifulSoup], base_url: Optional[str] = None):
        """
        Args:
            page: HTML код страницы или уже разобранный документ
            base_url: URL страницы, для разрешения относительных ссылок на изображения
        """
        self.base_url = base_url
        if isinstance(page, BeautifulSoup):
            self.soup = page
        else:
            self.soup = make_soup(page)

    @staticmethod
    def clean_text(text: str) -> str:
        """Очистка текста от нечитаемых символов и нормализация"""
        if not text:
            return text

        # Декодируем HTML entities (&#039; -> ', &quot; -> ", etc.)
        text = html.unescape(text)

        # Удаляем Unicode символы типа ▢, □, ✓ и другие специальные символы
        text = re.sub(r'[▢□✓✔▪▫●○■]', '', text)
        # Удаляем лишние пробелы
        text = re.sub(r'\s+', ' ', text)
        # Убираем пробелы в начале и конце
        text = text.strip()
        return text

    def element_text(self, element) -> str:
        """Текст элемента без лишних пробелов"""
        if element is None:
            return ''
        return self.clean_text(element.get_text(separator=' ', strip=True)) or ''

    def select_text(self, selector: str) -> str:
        """Текст первого элемента по CSS селектору или пустая строка"""
        return self.element_text(self.soup.select_one(selector))

    def select_texts(self, selectors: Iterable[str], min_length: int, unique: bool = False) -> list[str]:
        """
        Собирает тексты элементов по списку селекторов

        Args:
            selectors: CSS селекторы, обрабатываются по порядку
            min_length: текст сохраняется, только если его длина больше min_length
            unique: пропускать тексты, которые уже были собраны

        Returns:
            Список текстов в порядке обнаружения
        """
        texts: list[str] = []
        for selector in selectors:
            for element in self.soup.select(selector):
                text = self.element_text(element)
                if len(text) <= min_length:
                    continue
                if unique and text in texts:
                    continue
                texts.append(text)
        return texts

    def select_attr(self, selector: str, *attrs: str) -> Optional[str]:
        """Первое непустое значение атрибута первого элемента по селектору"""
        element = self.soup.select_one(selector)
        if element is None:
            return None
        for attr in attrs:
            value = element.get(attr)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return None

    def page_title(self, *delimiters: str) -> str:
        """Текст <title>, обрезанный по разделителям ("Pancakes | Site" -> "Pancakes")"""
        title_tag = self.soup.find('title')
        title = self.element_text(title_tag)
        for delimiter in delimiters:
            title = title.split(delimiter)[0].strip()
        return title

    def resolve_url(self, url: Optional[str]) -> Optional[str]:
        """Делает ссылку абсолютной относительно base_url (если он известен)"""
        if not url or not isinstance(url, str):
            return None
        url = url.strip()
        if not url:
            return None
        if self.base_url:
            return urljoin(self.base_url, url)
        return url

    @staticmethod
    def make_result(recipe: IntermediateRecipe) -> Optional[IntermediateRecipe]:
        """Возвращает рецепт только если он пригоден (название, ингредиенты и шаги не пустые)"""
        return recipe if recipe.is_usable() else None

    @abstractmethod
    def extract(self) -> Optional[IntermediateRecipe]:
        """Извлечение рецепта из страницы, None если рецепт не найден"""
        raise NotImplementedError("Метод extract должен быть реализован в подклассе")
