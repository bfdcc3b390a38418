from typing import Optional
from bs4 import BeautifulSoup


def make_soup(html_content: str) -> BeautifulSoup:
    """
    Разбор HTML страницы

    Args:
        html_content: HTML код страницы

    Returns:
        Документ BeautifulSoup (парсер lxml)
    """
    return BeautifulSoup(html_content or '', 'lxml')


def is_absolute_http_url(url: Optional[str]) -> bool:
    """Проверка что URL абсолютный и со схемой http/https"""
    if not url:
        return False
    return url.strip().lower().startswith(('http://', 'https://'))
