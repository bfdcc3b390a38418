"""
Ошибки скрейпера рецептов

TransportFailure - страница не была получена (сообщает загрузчик, до экстракции)
ExtractionFailed - ни одна стратегия не нашла рецепт на странице
IncompleteRecipe - рецепт найден, но не прошел проверку перед сохранением
"""

from typing import Sequence


class ScraperError(Exception):
    """Базовый класс для ошибок скрейпера"""
    def __init__(self, message: str = "Ошибка импорта рецепта"):
        self.message = message
        super().__init__(self.message)


class TransportFailure(ScraperError):
    """Ошибка загрузки страницы"""
    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(self.message)


class InvalidRecipeUrl(TransportFailure):
    """Ошибка: URL не http/https или без хоста"""
    def __init__(self, url: str):
        super().__init__(url, f"Некорректный URL рецепта: '{url}' (ожидается http или https)")


class SiteUnreachable(TransportFailure):
    """Ошибка: сайт недоступен (DNS, отказ в соединении, ошибочный HTTP статус)"""
    def __init__(self, url: str, reason: str = ""):
        self.reason = reason
        message = f"Не удалось подключиться к сайту: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(url, message)


class FetchTimeout(TransportFailure):
    """Ошибка: превышено время ожидания ответа"""
    def __init__(self, url: str, timeout: float):
        self.timeout = timeout
        super().__init__(url, f"Превышено время ожидания ({timeout} с) при загрузке {url}")


class ExtractionFailed(ScraperError):
    """Ошибка: ни одна стратегия не извлекла рецепт. Частичные данные не передаются"""
    def __init__(self, tried: Sequence[str] = ()):
        self.tried = list(tried)
        self.message = "Не удалось извлечь рецепт со страницы"
        if self.tried:
            self.message = f"{self.message} (испробованы: {', '.join(self.tried)})"
        super().__init__(self.message)


class IncompleteRecipe(ScraperError):
    """Ошибка: извлеченный рецепт не прошел проверку перед сохранением"""
    def __init__(self, reason: str):
        self.reason = reason
        self.message = f"Неполный рецепт: {reason}"
        super().__init__(self.message)


def user_message(error: ScraperError) -> str:
    """Сообщение для пользователя в зависимости от типа ошибки"""
    if isinstance(error, FetchTimeout):
        return "Request timed out while fetching the recipe"
    if isinstance(error, InvalidRecipeUrl):
        return "Please provide a valid http or https recipe URL"
    if isinstance(error, TransportFailure):
        return "Unable to connect to the recipe website"
    if isinstance(error, (ExtractionFailed, IncompleteRecipe)):
        return "Could not extract recipe data from this page. This site may not be supported"
    return "Failed to import recipe"
