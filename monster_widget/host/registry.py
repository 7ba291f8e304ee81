"""Lookup tables for widget types and sidebars."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Sidebar, WidgetType


class WidgetFactory:
    """Registry of widget types keyed by their identifier."""

    def __init__(self) -> None:
        """Create an empty widget registry."""
        self._widgets: dict[str, WidgetType] = {}

    def register(self, widget_type: WidgetType) -> None:
        """Register ``widget_type``, replacing any type with the same id."""
        self._widgets[widget_type.id] = widget_type

    def unregister(self, widget_id: str) -> None:
        """Remove a widget type; unknown identifiers are ignored."""
        self._widgets.pop(widget_id, None)

    def get(self, widget_id: str) -> WidgetType | None:
        """Return the widget type registered under ``widget_id``, if any."""
        return self._widgets.get(widget_id)

    def keys(self) -> list[str]:
        """Return registered widget identifiers in registration order."""
        return list(self._widgets)

    def __contains__(self, widget_id: object) -> bool:
        return widget_id in self._widgets

    def __len__(self) -> int:
        return len(self._widgets)


class SidebarRegistry:
    """Registry of sidebars keyed by their identifier."""

    def __init__(self, sidebars: cabc.Iterable[Sidebar] = ()) -> None:
        """Create a registry, optionally seeded with ``sidebars``."""
        self._sidebars: dict[str, Sidebar] = {}
        for sidebar in sidebars:
            self.register(sidebar)

    def register(self, sidebar: Sidebar) -> None:
        """Register ``sidebar``, replacing any sidebar with the same id."""
        self._sidebars[sidebar.id] = sidebar

    def get(self, sidebar_id: str) -> Sidebar | None:
        """Return the sidebar registered under ``sidebar_id``, if any."""
        return self._sidebars.get(sidebar_id)

    def __iter__(self) -> cabc.Iterator[Sidebar]:
        return iter(self._sidebars.values())

    def __contains__(self, sidebar_id: object) -> bool:
        return sidebar_id in self._sidebars

    def __len__(self) -> int:
        return len(self._sidebars)


__all__ = ["SidebarRegistry", "WidgetFactory"]
