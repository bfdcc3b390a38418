"""
Импорт рецепта по ссылке или из сохраненного HTML файла

Примеры:
    python scripts/scrape.py https://example.com/pancakes
    python scripts/scrape.py --html-file page.html --base-url https://example.com/pancakes
"""

import sys
import json
import logging
import argparse
from pathlib import Path

# Добавление корневой директории в PYTHONPATH
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import config
from src.common.errors import ScraperError, user_message
from src.stages.scrape import RecipeScraper

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - [%(threadName)s] - %(levelname)s - %(message)s',
    handlers=[
        logging.StreamHandler(),
    ]
)

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Импорт рецепта со страницы сайта")
    parser.add_argument('url', nargs='?', help='Ссылка на страницу рецепта')
    parser.add_argument('--html-file', type=str, default=None, help='Путь к сохраненному HTML файлу (без загрузки)')
    parser.add_argument('--base-url', type=str, default=None, help='URL страницы для --html-file (источник и относительные ссылки)')
    parser.add_argument('--timeout', type=float, default=None, help=f'Таймаут загрузки в секундах (по умолчанию: {config.SCRAPER_FETCH_TIMEOUT})')
    args = parser.parse_args(argv)

    if not args.url and not args.html_file:
        parser.error("нужно указать url или --html-file")

    scraper = RecipeScraper()
    if args.timeout is not None:
        scraper.fetcher.timeout = args.timeout

    try:
        if args.html_file:
            with open(args.html_file, 'r', encoding='utf-8') as f:
                recipe = scraper.scrape_html(f.read(), url=args.base_url or args.url)
        else:
            recipe = scraper.scrape(args.url)
    except ScraperError as e:
        logger.error(e.message)
        print(user_message(e), file=sys.stderr)
        return 1

    print(json.dumps(recipe.to_record(), ensure_ascii=False, indent=4))
    return 0


if __name__ == "__main__":
    sys.exit(main())
