"""
Utility functions for mapping between wiki article paths and slugs.

Every article lives under the wiki collection and is addressed by a path
derived from its file location. The slug is the last path segment, and it is
the identifier authors use in the ``relatedArticles`` front matter list and
the one clients put in URLs.

Format: "/wiki/{optional/sub/dirs/}{slug}"
Examples:
- "/wiki/rust-ownership"       -> slug "rust-ownership"
- "/wiki/lang/rust-ownership"  -> slug "rust-ownership"
"""

from pathlib import PurePath, PurePosixPath
from typing import Union

WIKI_COLLECTION = "wiki"
WIKI_PATH_PREFIX = f"/{WIKI_COLLECTION}"
MARKDOWN_SUFFIX = ".md"


def extract_slug(path: str) -> str:
    """
    Derive an article slug from its path.

    The slug is the last path segment. Other collaborators (the front matter
    ``relatedArticles`` lists and the ``/api/wiki/{slug}`` routes) depend on
    this convention, so it must not be re-implemented inline.

    Args:
        path: Article path, e.g. "/wiki/rust-ownership"

    Returns:
        The slug, e.g. "rust-ownership"

    Example:
        extract_slug("/wiki/lang/rust-ownership")
        Returns: "rust-ownership"
    """
    return path.split("/")[-1]


def article_path(slug: str) -> str:
    """
    Build the canonical path of a top-level wiki article from its slug.

    Args:
        slug: Article slug

    Returns:
        Article path, e.g. "/wiki/rust-ownership"
    """
    return f"{WIKI_PATH_PREFIX}/{slug}"


def path_from_file(file_path: Union[str, PurePath], wiki_root: Union[str, PurePath]) -> str:
    """
    Compute the article path of a Markdown file inside the wiki directory.

    Args:
        file_path: Location of the Markdown file
        wiki_root: The ``wiki`` directory of the content store

    Returns:
        Article path without the ``.md`` suffix
    """
    relative = PurePosixPath(PurePath(file_path).relative_to(wiki_root).as_posix())
    if relative.suffix == MARKDOWN_SUFFIX:
        relative = relative.with_suffix("")
    return f"{WIKI_PATH_PREFIX}/{relative.as_posix()}"


def is_valid_slug(slug: str) -> bool:
    """
    Check that a slug is usable as a single path segment.

    Args:
        slug: String to validate

    Returns:
        True if the slug is non-blank and holds no path separator
    """
    return bool(slug and slug.strip()) and "/" not in slug
