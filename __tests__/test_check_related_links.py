import asyncio
from pathlib import Path

from scripts.check_related_links import check_related_links

from conftest import front, write_article


def test_reports_dangling_references(content_dir: Path, capsys):
    dangling_count = asyncio.run(check_related_links(str(content_dir)))

    assert dangling_count == 1
    assert "/wiki/rust-ownership: unknown related article 'missing-page'" in capsys.readouterr().out


def test_consistent_content_passes(tmp_path: Path):
    write_article(tmp_path, "a", **front("A", ["b"]))
    write_article(tmp_path, "b", **front("B", ["a"]))

    assert asyncio.run(check_related_links(str(tmp_path))) == 0


def test_drafts_are_checked_by_default(tmp_path: Path):
    write_article(tmp_path, "a", **front("A"))
    write_article(tmp_path, "wip", **front("Work in progress", ["not-written-yet"], draft=True))

    assert asyncio.run(check_related_links(str(tmp_path))) == 1
    assert asyncio.run(check_related_links(str(tmp_path), include_drafts=False)) == 0
