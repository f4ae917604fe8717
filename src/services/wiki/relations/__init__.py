"""
Relations module for wiki services.
Handles related-article discovery and reference checks.
"""

from .related_articles import resolve_related_articles, find_dangling_references

__all__ = [
    'resolve_related_articles',
    'find_dangling_references'
]
