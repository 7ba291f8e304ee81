"""A widget that renders many widgets, for testing sidebar styles.

Placing the Monster widget in a sidebar renders a fixed list of stock widgets
(archives, calendar, categories, pages, meta, recent comments and posts, RSS,
search, text, tag cloud, plus a navigation menu and links when available) in
one go. Not intended for production use.

Exports
-------
- ``MonsterWidget``: the composite widget.
- ``RenderCounter``: sequence of sub-widget numbers shared by placements.
- ``WidgetSpec``: one configured sub-widget.
- ``install`` / ``register_monster_widget``: host registration helpers.
- ``get_widget_config``, ``get_best_nav_menu``, ``get_breaker_text``,
  ``get_widget_class``: the helpers the widget renders with.
- ``app`` / ``main``: the ``monster`` Cyclopts CLI.

Examples
--------
>>> from monster_widget import get_widget_config
>>> from monster_widget.host import Host
>>> len(get_widget_config(Host()))
13
"""

from __future__ import annotations

from .cli import app, main
from .widget import (
    MonsterWidget,
    RenderCounter,
    get_widget_class,
    install,
    register_monster_widget,
)
from .widget_config import (
    WidgetSpec,
    get_best_nav_menu,
    get_breaker_text,
    get_widget_config,
)

__all__ = [
    "MonsterWidget",
    "RenderCounter",
    "WidgetSpec",
    "app",
    "get_best_nav_menu",
    "get_breaker_text",
    "get_widget_class",
    "get_widget_config",
    "install",
    "main",
    "register_monster_widget",
]
