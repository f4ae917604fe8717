"""
Content build check: report related-article slugs that point at no article.

The API drops such references silently, so run this before publishing:

    python scripts/check_related_links.py [content_dir]

Exits with status 1 when any dangling reference is found.
"""

import asyncio
import logging
import os
import sys

# Add the repository root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.core.config import settings
from src.services.wiki import ContentLoader, WikiOrchestrator

# Set up logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


async def check_related_links(content_dir: str, include_drafts: bool = True) -> int:
    """
    Count the dangling related-article references under a content directory.

    Drafts are checked too by default, since they are about to be published.
    """
    loader = ContentLoader(content_dir=content_dir, include_drafts=include_drafts)
    dangling = await WikiOrchestrator(loader).get_dangling_references()

    for reference in dangling:
        print(f"{reference.path}: unknown related article '{reference.missing}'")

    if dangling:
        logger.error(f"Found {len(dangling)} dangling related-article references")
    else:
        logger.info("All related-article references resolve")
    return len(dangling)


def main():
    content_dir = sys.argv[1] if len(sys.argv) > 1 else settings.content_dir
    logger.info(f"Checking related-article references in {content_dir}")

    dangling_count = asyncio.run(check_related_links(content_dir))
    sys.exit(1 if dangling_count else 0)


if __name__ == "__main__":
    main()
