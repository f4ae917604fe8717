"""
Wiki services module.
Provides content loading and related-article discovery for the wiki.
"""

from .wiki_orchestrator import WikiOrchestrator

# Base services
from .base import BaseService

# Content services
from .content import ContentLoader

# Relations services
from .relations import resolve_related_articles, find_dangling_references

__all__ = [
    # Main orchestrator
    'WikiOrchestrator',

    # Base services
    'BaseService',

    # Content services
    'ContentLoader',

    # Relations services
    'resolve_related_articles',
    'find_dangling_references'
]
