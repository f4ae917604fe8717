from pathlib import Path

from src.utils.content_id import article_path, extract_slug, is_valid_slug, path_from_file


def test_extract_slug_takes_last_segment():
    assert extract_slug("/wiki/rust-ownership") == "rust-ownership"
    assert extract_slug("/wiki/lang/rust/rust-ownership") == "rust-ownership"


def test_article_path_is_inverse_of_extract_slug_for_top_level_articles():
    assert article_path("rust-ownership") == "/wiki/rust-ownership"
    assert extract_slug(article_path("rust-ownership")) == "rust-ownership"


def test_path_from_file_strips_markdown_suffix(tmp_path: Path):
    wiki_root = tmp_path / "wiki"

    assert path_from_file(wiki_root / "rust-ownership.md", wiki_root) == "/wiki/rust-ownership"
    assert path_from_file(wiki_root / "lang" / "lifetimes.md", wiki_root) == "/wiki/lang/lifetimes"


def test_is_valid_slug():
    assert is_valid_slug("rust-ownership")
    assert not is_valid_slug("")
    assert not is_valid_slug("   ")
    assert not is_valid_slug("lang/rust")
