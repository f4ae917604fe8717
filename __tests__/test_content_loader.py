"""
Tests for the file-backed wiki content store.
"""

import asyncio
from pathlib import Path

import pytest

from src.core.exceptions import ContentStoreError
from src.services.wiki import ContentLoader

from conftest import front, write_article


def test_get_all_articles_skips_drafts_and_orders_by_path(content_dir: Path):
    loader = ContentLoader(content_dir=str(content_dir), include_drafts=False)

    articles = asyncio.run(loader.get_all_articles())

    assert [article.slug for article in articles] == [
        "async-rust", "borrow-checker", "lifetimes", "rust-ownership"
    ]


def test_include_drafts_publishes_drafts(content_dir: Path):
    loader = ContentLoader(content_dir=str(content_dir), include_drafts=True)

    articles = asyncio.run(loader.get_all_articles())

    assert "secret-draft" in [article.slug for article in articles]


def test_front_matter_is_mapped_onto_article(content_dir: Path):
    loader = ContentLoader(content_dir=str(content_dir), include_drafts=False)

    article = asyncio.run(loader.get_article_by_path("/wiki/rust-ownership"))

    assert article.title == "Rust Ownership"
    assert article.description == "About Rust Ownership"
    assert article.date == "2024-03-01"
    assert article.labels == ["rust"]
    assert article.related_articles == ["borrow-checker", "missing-page"]
    assert article.body == "# Ownership"
    assert article.draft is False


def test_unquoted_yaml_dates_are_normalised(tmp_path: Path):
    file_path = tmp_path / "wiki" / "dated.md"
    file_path.parent.mkdir(parents=True)
    file_path.write_text(
        "---\ntitle: Dated\ndescription: A dated page\ndate: 2024-05-06\n---\nBody\n",
        encoding="utf-8",
    )
    loader = ContentLoader(content_dir=str(tmp_path), include_drafts=False)

    article = asyncio.run(loader.get_article_by_path("/wiki/dated"))

    assert article.date == "2024-05-06"
    assert article.labels == []
    assert article.related_articles == []


def test_nested_articles_keep_their_directory_in_the_path(tmp_path: Path):
    write_article(tmp_path, "lang/rust/lifetimes", **front("Lifetimes"))
    loader = ContentLoader(content_dir=str(tmp_path), include_drafts=False)

    articles = asyncio.run(loader.get_all_articles())
    nested = asyncio.run(loader.get_article_by_path("/wiki/lang/rust/lifetimes"))

    assert [article.path for article in articles] == ["/wiki/lang/rust/lifetimes"]
    assert articles[0].slug == "lifetimes"
    assert nested.title == "Lifetimes"


@pytest.mark.parametrize("path", [
    "/wiki/missing-page",
    "/wiki/secret-draft",
    "/wiki/../wiki/rust-ownership",
    "/wiki/",
    "/blog/rust-ownership",
])
def test_get_article_by_path_returns_none_for_unpublished_paths(content_dir: Path, path: str):
    loader = ContentLoader(content_dir=str(content_dir), include_drafts=False)

    assert asyncio.run(loader.get_article_by_path(path)) is None


def test_invalid_front_matter_raises_content_store_error(tmp_path: Path):
    write_article(tmp_path, "untitled", description="No title", date="2024-01-01")
    loader = ContentLoader(content_dir=str(tmp_path), include_drafts=False)

    with pytest.raises(ContentStoreError) as exc_info:
        asyncio.run(loader.get_all_articles())

    assert "untitled.md" in str(exc_info.value)


def test_missing_content_directory_raises_content_store_error(tmp_path: Path):
    loader = ContentLoader(content_dir=str(tmp_path / "nowhere"), include_drafts=False)

    with pytest.raises(ContentStoreError):
        asyncio.run(loader.get_all_articles())

    health = asyncio.run(loader.health_check())
    assert health["healthy"] is False


def test_duplicate_slugs_are_logged(tmp_path: Path, caplog):
    write_article(tmp_path, "a/notes", **front("Notes A"))
    write_article(tmp_path, "b/notes", **front("Notes B"))
    loader = ContentLoader(content_dir=str(tmp_path), include_drafts=False)

    with caplog.at_level("WARNING"):
        asyncio.run(loader.get_all_articles())

    assert "Slug 'notes' is shared by 2 articles" in caplog.text
