"""
Wiki orchestrator service.
Composes the content store with the pure relation functions.
"""

from typing import List, Optional

from .base import BaseService
from .content import ContentLoader
from .relations import find_dangling_references, resolve_related_articles
from ...core.exceptions import ArticleNotFoundError, ContentStoreError, MissingParameterError
from ...schemas.wiki_schemas import Article, ArticleSummary, DanglingReference
from ...utils.content_id import article_path, is_valid_slug


class WikiOrchestrator(BaseService):
    """
    Main entry point for wiki operations.
    Each call reads its own corpus snapshot from the content loader.
    """

    def __init__(self, content_loader: Optional[ContentLoader] = None):
        """
        Initialize the wiki orchestrator.

        Args:
            content_loader: Content store to read from; defaults to the configured one
        """
        super().__init__()
        self.content_loader = content_loader or ContentLoader()

    def get_service_name(self) -> str:
        """Get the service name."""
        return "wiki_orchestrator"

    def _require_slug(self, slug: Optional[str]) -> str:
        if slug is None or not slug.strip():
            raise MissingParameterError("slug")
        return slug

    async def _get_target(self, slug: str) -> Article:
        if not is_valid_slug(slug):
            raise ArticleNotFoundError(slug)

        article = await self.content_loader.get_article_by_path(article_path(slug))
        if article is None:
            self.logger.warning(f"[{self.get_service_name()}] Article not found: {slug}")
            raise ArticleNotFoundError(slug)
        return article

    async def list_articles(self, label: Optional[str] = None) -> List[ArticleSummary]:
        """
        List every published article, newest first.

        Args:
            label: Only return articles carrying this label

        Returns:
            List[ArticleSummary]: Article summaries
        """
        try:
            articles = await self.content_loader.get_all_articles()
            if label:
                articles = [article for article in articles if label in article.labels]

            # Stable sort: articles sharing a date keep path order
            articles = sorted(articles, key=lambda article: article.date, reverse=True)
            return [article.to_summary() for article in articles]
        except ContentStoreError as e:
            self._handle_service_error(e, "Error listing articles")

    async def get_article(self, slug: Optional[str]) -> Article:
        """
        Get a single article by slug.

        Args:
            slug: Article slug

        Returns:
            Article: The article

        Raises:
            MissingParameterError: If the slug is blank
            ArticleNotFoundError: If no published article has this slug
        """
        slug = self._require_slug(slug)
        try:
            return await self._get_target(slug)
        except ContentStoreError as e:
            self._handle_service_error(e, f"Error getting article {slug}")

    async def get_related_articles(self, slug: Optional[str]) -> List[ArticleSummary]:
        """
        Get the articles related to a specific article, in either direction.

        Args:
            slug: Article slug

        Returns:
            List[ArticleSummary]: Related articles

        Raises:
            MissingParameterError: If the slug is blank
            ArticleNotFoundError: If no published article has this slug
        """
        slug = self._require_slug(slug)
        try:
            target = await self._get_target(slug)
            corpus = await self.content_loader.get_all_articles()
        except ContentStoreError as e:
            self._handle_service_error(e, f"Error resolving related articles for {slug}")

        # The fetched article, not the first one sharing its slug, supplies the forward links
        related = resolve_related_articles(target.slug, corpus, target_path=target.path)
        self._log_info(f"Resolved {len(related)} related articles for {slug}")
        return related

    async def get_dangling_references(self) -> List[DanglingReference]:
        """
        Find related-article slugs that point at no published article.

        Returns:
            List[DanglingReference]: Dangling references
        """
        corpus = await self.content_loader.get_all_articles()
        dangling = find_dangling_references(corpus)
        for reference in dangling:
            self.logger.warning(
                f"[{self.get_service_name()}] {reference.path} declares unknown related article "
                f"'{reference.missing}'"
            )
        return dangling
