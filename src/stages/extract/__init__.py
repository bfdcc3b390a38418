"""
Recipe extraction from HTML pages
"""

from .recipe_extractor import RecipeExtractor, extract_recipe, DEFAULT_STRATEGIES

__all__ = ['RecipeExtractor', 'extract_recipe', 'DEFAULT_STRATEGIES']
