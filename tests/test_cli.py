"""Tests for the ``monster`` CLI commands.

The command functions are called directly so the tests exercise the same
code paths Cyclopts dispatches to, without parsing ``sys.argv``.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from bs4 import BeautifulSoup

from monster_widget import cli


def _write_config(tmp_path: Path) -> Path:
    path = tmp_path / "monster.yaml"
    path.write_text(
        dedent(
            """
            site:
              title: CLI Preview
            output: public/monster.html
            widgets:
              fetch_feeds: true
            sidebars:
              sidebar-1:
                name: Primary
                widgets: [monster]
            nav_menus:
              - id: 9
                name: Main
                items:
                  - {label: Home, url: /}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    return path


def test_preview_writes_page_offline(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``preview --offline`` renders every sidebar without network access."""
    config = _write_config(tmp_path)
    cli.preview(config=config, offline=True)

    output = tmp_path / "public" / "monster.html"
    assert output.exists(), "expected the preview page to be written"
    assert capsys.readouterr().out.strip().startswith("wrote ")
    html = output.read_text(encoding="utf-8")
    assert html.endswith("\n")
    soup = BeautifulSoup(html, "html.parser")
    assert soup.title.get_text() == "CLI Preview"
    aside = soup.select_one("aside#sidebar-1")
    assert aside is not None
    placeholders = aside.select('[id^="monster-widget-placeholder-"]')
    assert len(placeholders) == 14, "expected 13 fixed widgets plus the nav menu"
    assert aside.select_one(".rss-error") is not None


def test_preview_honours_output_override(tmp_path: Path) -> None:
    """An explicit output path wins over the configured one."""
    config = _write_config(tmp_path)
    target = tmp_path / "elsewhere" / "page.html"
    cli.preview(config=config, output=target, offline=True)
    assert target.exists()
    assert not (tmp_path / "public" / "monster.html").exists()


def test_widgets_lists_types_and_titles(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``widgets`` prints one line per configured sub-widget."""
    cli.widgets(config=_write_config(tmp_path))
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "archives: Archives List"
    assert lines[-1] == "nav_menu: Nav Menu"
    assert len(lines) == 14
