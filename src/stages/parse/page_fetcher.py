"""
Загрузка HTML страницы рецепта по URL

Ошибки загрузки (DNS, отказ соединения, таймаут) сообщаются отдельно от ошибок извлечения,
до того как страница попадет в RecipeExtractor. Повторов и кеша нет.
"""

import logging
from typing import Optional
from urllib.parse import urlparse

import requests

from config.config import config
from src.common.errors import InvalidRecipeUrl, SiteUnreachable, FetchTimeout

logger = logging.getLogger(__name__)


class PageFetcher:
    """Загрузчик страниц на requests"""

    def __init__(self, timeout: Optional[float] = None, user_agent: Optional[str] = None,
                 proxy: Optional[str] = None, session: Optional[requests.Session] = None):
        """
        Args:
            timeout: Таймаут запроса в секундах (по умолчанию SCRAPER_FETCH_TIMEOUT)
            user_agent: User-Agent браузера (по умолчанию SCRAPER_USER_AGENT)
            proxy: Прокси для http и https (по умолчанию PROXY)
            session: Сессия requests (по умолчанию новая)
        """
        self.timeout = timeout if timeout is not None else config.SCRAPER_FETCH_TIMEOUT
        self.user_agent = user_agent or config.SCRAPER_USER_AGENT
        self.proxy = proxy if proxy is not None else config.PROXY
        self.session = session or requests.Session()

    @staticmethod
    def validate_url(url: str) -> str:
        """
        Проверка URL перед загрузкой: схема http/https и непустой хост

        Raises:
            InvalidRecipeUrl: если URL не подходит
        """
        if not url or not isinstance(url, str):
            raise InvalidRecipeUrl(str(url))
        url = url.strip()
        parsed = urlparse(url)
        if parsed.scheme.lower() not in ('http', 'https') or not parsed.netloc:
            raise InvalidRecipeUrl(url)
        return url

    @property
    def headers(self) -> dict:
        return {
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }

    def fetch(self, url: str) -> str:
        """
        Скачать HTML страницы

        Returns:
            HTML код страницы

        Raises:
            InvalidRecipeUrl, SiteUnreachable, FetchTimeout
        """
        url = self.validate_url(url)
        try:
            response = self.session.get(
                url,
                timeout=self.timeout,
                headers=self.headers,
                proxies={
                    "http": self.proxy,
                    "https": self.proxy
                } if self.proxy else None
            )
            response.raise_for_status()
        except requests.Timeout as e:
            logger.warning(f"Timeout fetching {url} after {self.timeout}s: {e}")
            raise FetchTimeout(url, self.timeout) from e
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning(f"HTTP error fetching {url}: {status}")
            raise SiteUnreachable(url, f"HTTP {status}") from e
        except requests.RequestException as e:
            logger.error(f"Failed to fetch {url}: {e}")
            raise SiteUnreachable(url, type(e).__name__) from e

        return self.decode(response)

    @staticmethod
    def decode(response: requests.Response) -> str:
        """
        Текст ответа с учетом кодировки

        Если charset не указан в Content-Type, requests считает text/html как ISO-8859-1.
        В этом случае пробуем UTF-8, а если байты не декодируются - кодировку, определенную по содержимому.
        """
        content_type = response.headers.get('Content-Type') or ''
        if 'charset' in content_type.lower():
            return response.text

        try:
            return response.content.decode('utf-8')
        except UnicodeDecodeError:
            response.encoding = response.apparent_encoding
            logger.debug(f"No charset for {response.url}, detected {response.encoding}")
            return response.text
