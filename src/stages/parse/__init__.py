"""
Page download for recipe scraping
"""

from .page_fetcher import PageFetcher

__all__ = ['PageFetcher']
