import os
import tempfile

# Keep activity/error log files out of the working tree; must run before src is imported
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="wiki-logs-"))

from pathlib import Path

import frontmatter
import pytest
from fastapi.testclient import TestClient

from src.routers.wiki_routes import get_wiki_service
from src.services.wiki import ContentLoader, WikiOrchestrator


def write_article(content_dir: Path, relative_path: str, body: str = "", **metadata) -> Path:
    """Write a Markdown article with front matter under content_dir/wiki/"""
    file_path = content_dir / "wiki" / f"{relative_path}.md"
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(frontmatter.dumps(frontmatter.Post(body, **metadata)), encoding="utf-8")
    return file_path


def front(title: str, related=None, date: str = "2024-01-01", labels=None, **extra) -> dict:
    metadata = {
        "title": title,
        "description": f"About {title}",
        "date": date,
        "labels": labels if labels is not None else [],
        "relatedArticles": related if related is not None else [],
    }
    metadata.update(extra)
    return metadata


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """
    A small wiki:
    - rust-ownership -> borrow-checker, missing-page
    - borrow-checker (no links)
    - lifetimes -> rust-ownership
    - async-rust (unrelated)
    - secret-draft -> rust-ownership (draft)
    """
    write_article(tmp_path, "rust-ownership", "# Ownership",
                  **front("Rust Ownership", ["borrow-checker", "missing-page"],
                          date="2024-03-01", labels=["rust"]))
    write_article(tmp_path, "borrow-checker", "# Borrowing",
                  **front("Borrow Checker", date="2024-02-01", labels=["rust", "compiler"]))
    write_article(tmp_path, "lifetimes", "# Lifetimes",
                  **front("Lifetimes", ["rust-ownership"], date="2024-04-01"))
    write_article(tmp_path, "async-rust", "# Async",
                  **front("Async Rust", date="2023-12-24", labels=["rust", "async"]))
    write_article(tmp_path, "secret-draft", "# Draft",
                  **front("Secret Draft", ["rust-ownership"], draft=True))
    return tmp_path


@pytest.fixture
def wiki_service(content_dir: Path) -> WikiOrchestrator:
    return WikiOrchestrator(ContentLoader(content_dir=str(content_dir), include_drafts=False))


@pytest.fixture
def client(wiki_service: WikiOrchestrator):
    from main import app

    app.dependency_overrides[get_wiki_service] = lambda: wiki_service
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
