"""
Related-article discovery for wiki content.

Authors curate a ``relatedArticles`` list in each article's front matter. That
graph is directed and usually asymmetric; readers expect the relation to be
symmetric, so an article's related set is the union of the slugs it declares
(forward links) and the slugs of the articles that declare it (reverse links).
Expansion stops at depth 1.

These functions are pure: they take a corpus snapshot, never mutate it, and do
not depend on the web framework or on the content store.
"""

from typing import Dict, List, Optional, Sequence

from ....core.exceptions import ArticleNotFoundError
from ....schemas.wiki_schemas import Article, ArticleSummary, DanglingReference
from ....utils.content_id import extract_slug


def _find_target(slug: str, corpus: Sequence[Article], path: Optional[str] = None) -> Article:
    for article in corpus:
        if path is not None:
            if article.path == path:
                return article
        elif extract_slug(article.path) == slug:
            return article
    raise ArticleNotFoundError(path or slug)


def resolve_related_articles(target_slug: str, corpus: Sequence[Article],
                             target_path: Optional[str] = None) -> List[ArticleSummary]:
    """
    Compute the articles related to ``target_slug``.

    Args:
        target_slug: Slug of the article whose relations are wanted
        corpus: Every published article
        target_path: Exact path of the target. Without it the first article
            in the corpus carrying ``target_slug`` is the target.

    Returns:
        List[ArticleSummary]: Related articles in corpus order. The target
        itself is never part of the result.

    Raises:
        ArticleNotFoundError: If the corpus holds no matching article
    """
    target = _find_target(target_slug, corpus, target_path)

    forward_slugs = target.related_articles
    reverse_slugs = [
        extract_slug(article.path)
        for article in corpus
        if target_slug in article.related_articles
    ]

    # dict.fromkeys keeps first appearance: forward links, then reverse links
    related_slugs = dict.fromkeys([*forward_slugs, *reverse_slugs])
    related_slugs.pop(target_slug, None)

    # Dangling slugs fall out here: they match nothing in the corpus
    return [
        article.to_summary()
        for article in corpus
        if extract_slug(article.path) in related_slugs
    ]


def find_dangling_references(corpus: Sequence[Article]) -> List[DanglingReference]:
    """
    List every declared related slug that matches no article in the corpus.

    Request handling drops these silently; this check is meant for content
    build time.

    Args:
        corpus: Every article that should be linkable

    Returns:
        List[DanglingReference]: One entry per (declaring article, missing slug)
    """
    known_slugs: Dict[str, None] = dict.fromkeys(extract_slug(article.path) for article in corpus)

    dangling = []
    for article in corpus:
        for missing in dict.fromkeys(article.related_articles):
            if missing not in known_slugs:
                dangling.append(DanglingReference(
                    slug=extract_slug(article.path),
                    path=article.path,
                    missing=missing,
                ))
    return dangling
