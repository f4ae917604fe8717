"""
Content module for wiki services.
Handles loading articles from the content store.
"""

from .content_loader import ContentLoader

__all__ = [
    'ContentLoader'
]
