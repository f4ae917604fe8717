"""
Content loader service for wiki articles.
Reads Markdown files with YAML front matter from the content directory.
"""

from collections import Counter
from pathlib import Path
from typing import List, Optional

import frontmatter
import yaml
from pydantic import ValidationError

from ..base import BaseService
from ....core.config import settings
from ....core.exceptions import ContentStoreError
from ....schemas.wiki_schemas import Article
from ....utils.content_id import (
    MARKDOWN_SUFFIX,
    WIKI_COLLECTION,
    WIKI_PATH_PREFIX,
    extract_slug,
    path_from_file,
)


class ContentLoader(BaseService):
    """
    Service for loading wiki articles from files.
    Every call reads a fresh snapshot from disk.
    """

    def __init__(self, content_dir: Optional[str] = None,
                 include_drafts: Optional[bool] = None):
        """
        Initialize the content loader.

        Args:
            content_dir: Optional path to the content directory
            include_drafts: Whether draft articles are published
        """
        super().__init__()

        if content_dir is None:
            self._content_dir = Path(settings.content_dir)
        else:
            self._content_dir = Path(content_dir)

        if include_drafts is None:
            self._include_drafts = settings.include_drafts
        else:
            self._include_drafts = include_drafts

    def get_service_name(self) -> str:
        """Get the service name."""
        return "content_loader"

    @property
    def wiki_dir(self) -> Path:
        return self._content_dir / WIKI_COLLECTION

    def _ensure_wiki_dir(self):
        if not self.wiki_dir.is_dir():
            error_msg = f"Wiki content directory not found at {self.wiki_dir}"
            self.logger.error(error_msg)
            raise ContentStoreError(error_msg)

    def _load_article(self, file_path: Path) -> Article:
        """
        Parse a single Markdown file into an Article.

        Args:
            file_path: Location of the Markdown file

        Returns:
            Article: The parsed article

        Raises:
            ContentStoreError: If the file can't be read or its front matter is invalid
        """
        try:
            post = frontmatter.load(str(file_path))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            error_msg = f"Error reading wiki article {file_path}: {e}"
            self.logger.error(error_msg)
            raise ContentStoreError(error_msg) from e

        data = dict(post.metadata)
        data["path"] = path_from_file(file_path, self.wiki_dir)
        data["body"] = post.content

        try:
            return Article.model_validate(data)
        except ValidationError as e:
            error_msg = f"Invalid front matter in {file_path}: {e}"
            self.logger.error(error_msg)
            raise ContentStoreError(error_msg) from e

    def _is_published(self, article: Article) -> bool:
        return self._include_drafts or not article.draft

    def _warn_duplicate_slugs(self, articles: List[Article]):
        counts = Counter(extract_slug(article.path) for article in articles)
        for slug, count in counts.items():
            if count > 1:
                self.logger.warning(
                    f"[{self.get_service_name()}] Slug '{slug}' is shared by {count} articles; "
                    f"slug-only lookups take the first by path"
                )

    def _file_for_path(self, path: str) -> Optional[Path]:
        """
        Map an article path to its Markdown file, refusing anything outside the wiki.

        Args:
            path: Article path, e.g. "/wiki/rust-ownership"

        Returns:
            Optional[Path]: The file location, or None if the path can't name an article
        """
        prefix = f"{WIKI_PATH_PREFIX}/"
        if not path.startswith(prefix):
            return None

        relative = path[len(prefix):]
        parts = relative.split("/")
        if not relative or any(part in ("", ".", "..") for part in parts):
            return None

        return self.wiki_dir.joinpath(*parts).with_name(parts[-1] + MARKDOWN_SUFFIX)

    async def get_all_articles(self) -> List[Article]:
        """
        Load every published article.

        Returns:
            List[Article]: Articles ordered by path

        Raises:
            ContentStoreError: If the content directory is missing or a file is malformed
        """
        self._ensure_wiki_dir()

        articles = []
        for file_path in self.wiki_dir.rglob(f"*{MARKDOWN_SUFFIX}"):
            article = self._load_article(file_path)
            if self._is_published(article):
                articles.append(article)

        articles.sort(key=lambda article: article.path)
        self._warn_duplicate_slugs(articles)

        self._log_info(f"Loaded {len(articles)} published articles from {self.wiki_dir}")
        return articles

    async def get_article_by_path(self, path: str) -> Optional[Article]:
        """
        Load a single published article by its path.

        Args:
            path: Article path, e.g. "/wiki/rust-ownership"

        Returns:
            Optional[Article]: The article, or None if it doesn't exist or is a draft
        """
        self._ensure_wiki_dir()

        file_path = self._file_for_path(path)
        if file_path is None or not file_path.is_file():
            return None

        article = self._load_article(file_path)
        if not self._is_published(article):
            return None
        return article

    async def health_check(self) -> dict:
        """
        Report whether the content directory is readable.

        Returns:
            dict: Health check results
        """
        return {
            "service": self.get_service_name(),
            "healthy": self.wiki_dir.is_dir(),
            "content_dir": str(self.wiki_dir),
        }
