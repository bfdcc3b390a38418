"""
Data models
"""

from .recipe import IntermediateRecipe, Ingredient, Step, RecipeSource, ScrapedRecipe

__all__ = ['IntermediateRecipe', 'Ingredient', 'Step', 'RecipeSource', 'ScrapedRecipe']
