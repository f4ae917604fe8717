from fastapi import APIRouter, Depends, Query
from typing import List, Optional
import logging

from ..services.wiki import WikiOrchestrator
from ..schemas.wiki_schemas import ArticleDetail, ArticleSummary

router = APIRouter(prefix="/wiki", tags=["Wiki"])
logger = logging.getLogger(__name__)


# Dependency to get wiki service
def get_wiki_service() -> WikiOrchestrator:
    return WikiOrchestrator()


@router.get("", response_model=List[ArticleSummary])
async def list_articles(
    label: Optional[str] = Query(None, description="Only return articles carrying this label"),
    service: WikiOrchestrator = Depends(get_wiki_service)
):
    """
    List every published article, newest first.
    """
    return await service.list_articles(label=label)


@router.get("/{slug}", response_model=ArticleDetail)
async def get_article(
    slug: str,
    service: WikiOrchestrator = Depends(get_wiki_service)
):
    """
    Get a single article with its declared related slugs and Markdown source.
    """
    article = await service.get_article(slug)
    return ArticleDetail.from_article(article)


@router.get("/{slug}/related", response_model=List[ArticleSummary])
async def get_related_articles(
    slug: str,
    service: WikiOrchestrator = Depends(get_wiki_service)
):
    """
    Get the articles related to an article in either direction: those it
    declares in ``relatedArticles`` and those declaring it.
    """
    related = await service.get_related_articles(slug)
    logger.debug(f"Returning {len(related)} related articles for {slug}")
    return related
