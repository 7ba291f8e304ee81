"""Typed dataclasses describing a Monster widget preview site."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from monster_widget.host.content import SiteContent
from monster_widget.host.feeds import DEFAULT_TIMEOUT
from monster_widget.host.models import NavMenu, Sidebar  # noqa: TC001


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class LocaleConfig:
    """Where translation catalogs live and which languages to prefer."""

    locale_dir: Path | None = None
    languages: list[str] = dc.field(default_factory=list)


@dc.dataclass(slots=True)
class WidgetOptions:
    """Switches for the stock widgets the preview host registers."""

    links: bool = False
    fetch_feeds: bool = True
    feed_timeout: float = DEFAULT_TIMEOUT


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved preview site."""

    title: str = "Monster Widget Preview"
    language: str = "en"
    stylesheet: str | None = None
    output: Path = Path("public/monster.html")
    locale: LocaleConfig = dc.field(default_factory=LocaleConfig)
    widgets: WidgetOptions = dc.field(default_factory=WidgetOptions)
    sidebars: list[Sidebar] = dc.field(default_factory=list)
    nav_menus: list[NavMenu] = dc.field(default_factory=list)
    content: SiteContent = dc.field(default_factory=SiteContent)

    def get_sidebar(self, sidebar_id: str) -> Sidebar:
        """Return the sidebar called ``sidebar_id``."""
        for sidebar in self.sidebars:
            if sidebar.id == sidebar_id:
                return sidebar
        available = ", ".join(sidebar.id for sidebar in self.sidebars)
        msg = f"Unknown sidebar '{sidebar_id}'. Known sidebars: {available}"
        raise KeyError(msg)


__all__ = ["LocaleConfig", "SiteConfig", "SiteConfigError", "WidgetOptions"]
