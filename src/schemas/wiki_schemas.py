from typing import List
from datetime import date, datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.utils.content_id import extract_slug


class ArticleSummary(BaseModel):
    """Public view of an article, as listed by the wiki endpoints"""
    title: str
    description: str
    slug: str
    path: str
    date: str
    labels: List[str] = Field(default_factory=list)


class Article(BaseModel):
    """A wiki article loaded from the content store"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    path: str
    title: str
    description: str
    date: str
    labels: List[str] = Field(default_factory=list)
    related_articles: List[str] = Field(default_factory=list, alias="relatedArticles")
    draft: bool = False
    body: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def normalise_date(cls, value):
        """YAML front matter yields date objects for unquoted dates"""
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value

    @field_validator("labels", "related_articles", mode="before")
    @classmethod
    def none_as_empty(cls, value):
        if value is None:
            return []
        return value

    @property
    def slug(self) -> str:
        return extract_slug(self.path)

    def to_summary(self) -> ArticleSummary:
        return ArticleSummary(
            title=self.title,
            description=self.description,
            slug=self.slug,
            path=self.path,
            date=self.date,
            labels=list(self.labels),
        )


class ArticleDetail(ArticleSummary):
    """Full article payload, including its declared relations and Markdown source"""
    model_config = ConfigDict(populate_by_name=True)

    related_articles: List[str] = Field(default_factory=list, alias="relatedArticles")
    body: str = ""

    @classmethod
    def from_article(cls, article: Article) -> "ArticleDetail":
        return cls(
            **article.to_summary().model_dump(),
            related_articles=list(article.related_articles),
            body=article.body,
        )


class DanglingReference(BaseModel):
    """A related-article slug declared by an article but matching no article"""
    slug: str
    path: str
    missing: str
