"""Typed records exchanged between the sandbox host and its widgets."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

WidgetSettings = typ.Mapping[str, typ.Any]


class NavMenuQueryError(RuntimeError):
    """Raised when the host cannot enumerate its navigation menus."""


@dc.dataclass(frozen=True, slots=True)
class DisplayArgs:
    """Per-sidebar wrapper markup handed to a widget when it renders.

    Attributes
    ----------
    id : str
        Identifier of the sidebar the widget renders in.
    name : str
        Human label of that sidebar.
    before_widget : str
        Opening wrapper markup. Sidebars register it as a ``str.format``
        template with ``{widget_id}`` and ``{widget_class}`` fields; widgets
        receive it already formatted.
    after_widget : str
        Closing wrapper markup.
    before_title : str
        Markup emitted before a widget title.
    after_title : str
        Markup emitted after a widget title.
    widget_id : str or None
        Instance identifier, also used as the cache key by caching widgets.
    widget_name : str or None
        Human label of the widget type being rendered.
    """

    id: str = ""
    name: str = ""
    before_widget: str = '<div class="widget {widget_class}">'
    after_widget: str = "</div>"
    before_title: str = '<h2 class="widgettitle">'
    after_title: str = "</h2>"
    widget_id: str | None = None
    widget_name: str | None = None


@dc.dataclass(frozen=True, slots=True)
class WidgetType:
    """Descriptor for a widget type registered with the host."""

    id: str
    name: str
    render: cabc.Callable[[WidgetSettings, DisplayArgs], str | None]
    css_class: str | None = None
    description: str = ""


@dc.dataclass(frozen=True, slots=True)
class WidgetPlacement:
    """A widget placed in a sidebar along with its saved settings."""

    widget_type: str
    settings: dict[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class Sidebar:
    """A named placement region and the wrapper templates it applies."""

    id: str
    name: str
    before_widget: str = '<section id="{widget_id}" class="widget {widget_class}">'
    after_widget: str = "</section>"
    before_title: str = '<h2 class="widget-title">'
    after_title: str = "</h2>"
    widgets: tuple[WidgetPlacement, ...] = ()

    def display_args(self) -> DisplayArgs:
        """Return unformatted display args carrying this sidebar's templates."""
        return DisplayArgs(
            id=self.id,
            name=self.name,
            before_widget=self.before_widget,
            after_widget=self.after_widget,
            before_title=self.before_title,
            after_title=self.after_title,
        )


@dc.dataclass(frozen=True, slots=True)
class NavMenuItem:
    """A single link inside a navigation menu."""

    label: str
    url: str
    children: tuple[NavMenuItem, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class NavMenu:
    """A navigation menu known to the host."""

    id: int
    name: str
    items: tuple[NavMenuItem, ...] = ()

    @property
    def link_count(self) -> int:
        """Return the number of links in the menu, nested links included."""
        return _count_items(self.items)


def _count_items(items: cabc.Iterable[NavMenuItem]) -> int:
    return sum(1 + _count_items(item.children) for item in items)


__all__ = [
    "DisplayArgs",
    "NavMenu",
    "NavMenuItem",
    "NavMenuQueryError",
    "Sidebar",
    "WidgetPlacement",
    "WidgetSettings",
    "WidgetType",
]
