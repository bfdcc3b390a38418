"""
Recipe scraping pipeline stages
"""

from .parse import PageFetcher
from .extract import RecipeExtractor, extract_recipe
from .scrape import RecipeScraper

__all__ = ['PageFetcher', 'RecipeExtractor', 'extract_recipe', 'RecipeScraper']
