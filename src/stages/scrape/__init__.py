"""
Recipe import by URL
"""

from .recipe_scraper import RecipeScraper, RecipeStore

__all__ = ['RecipeScraper', 'RecipeStore']
