"""
Конфигурация скрейпера рецептов и скриптов
"""
import os
from typing import Optional
from dotenv import load_dotenv

# Загружаем переменные из .env файла
load_dotenv()

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
    '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
)


class Config:
    """Централизованная конфигурация приложения из переменных окружения"""

    # Настройки загрузки страниц
    SCRAPER_FETCH_TIMEOUT: float = float(os.getenv('SCRAPER_FETCH_TIMEOUT', '15'))
    SCRAPER_USER_AGENT: str = os.getenv('SCRAPER_USER_AGENT', DEFAULT_USER_AGENT)
    PROXY: Optional[str] = os.getenv('PROXY')

    # Проверка результата перед сохранением
    SCRAPER_MIN_TITLE_LENGTH: int = int(os.getenv('SCRAPER_MIN_TITLE_LENGTH', '2'))

    # Логирование
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO').upper()


# единый экземпляр конфигурации
config = Config()
