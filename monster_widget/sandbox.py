"""Assemble a ready-to-render host from a preview site configuration."""

from __future__ import annotations

import typing as typ

from .host import FeedReader, Host, Translator, register_core_widgets
from .widget import install

if typ.TYPE_CHECKING:
    import requests

    from .config import SiteConfig


def build_host(
    site_config: SiteConfig,
    *,
    output: typ.TextIO | None = None,
    session: requests.Session | None = None,
    fetch_feeds: bool | None = None,
) -> Host:
    """Return a started host with the stock widgets and the Monster widget.

    Parameters
    ----------
    site_config : SiteConfig
        Parsed preview site configuration.
    output : TextIO, optional
        Stream the host writes markup to.
    session : requests.Session, optional
        HTTP session handed to the RSS widget's feed reader.
    fetch_feeds : bool, optional
        Override ``site_config.widgets.fetch_feeds``.
    """
    translator = Translator(
        site_config.locale.locale_dir, site_config.locale.languages or None
    )
    host = Host(
        sidebars=site_config.sidebars,
        nav_menus=site_config.nav_menus,
        translator=translator,
        output=output,
    )
    enabled = site_config.widgets.fetch_feeds if fetch_feeds is None else fetch_feeds
    feeds = FeedReader(
        session=session, timeout=site_config.widgets.feed_timeout, enabled=enabled
    )
    register_core_widgets(
        host,
        site_config.content,
        include_links=site_config.widgets.links,
        feeds=feeds,
    )
    install(host)
    host.start()
    return host


__all__ = ["build_host"]
