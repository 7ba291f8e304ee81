"""The Monster widget: one sidebar slot that renders many widgets.

Placing a Monster widget in a sidebar renders every entry produced by
:func:`~monster_widget.widget_config.get_widget_config`, each wrapped in the
sidebar's own before/after markup, so a theme's widget styling can be checked
in one go. It is a testing aid and not intended for production use.

Each rendered sub-widget receives a unique DOM id taken from a
:class:`RenderCounter`. The counter is created by
:func:`register_monster_widget` and shared by every placement, so ids never
repeat for the lifetime of the host process.

Examples
--------
>>> from monster_widget.host import Host, Sidebar
>>> host = Host(sidebars=[Sidebar(id="sidebar-1", name="Sidebar")])
>>> install(host)
>>> host.start()
>>> "monster" in host.widgets
True
"""

from __future__ import annotations

import dataclasses as dc
import itertools
import logging
import typing as typ

from ._constants import (
    MONSTER_CSS_CLASS,
    MONSTER_WIDGET_ID,
    PLACEHOLDER_ID_TEMPLATE,
    RECENT_POSTS_CACHE_TEMPLATE,
    TEXT_DOMAIN,
)
from .host.builtin import RECENT_POSTS
from .host.models import WidgetType
from .host.runtime import WIDGETS_INIT
from .widget_config import WidgetSpec, get_widget_config

if typ.TYPE_CHECKING:
    from .host.models import DisplayArgs, WidgetSettings
    from .host.registry import WidgetFactory
    from .host.runtime import Host

logger = logging.getLogger(__name__)


class RenderCounter:
    """Monotonic sequence of sub-widget numbers, starting at 1.

    >>> counter = RenderCounter()
    >>> counter.value
    1
    >>> counter.advance()
    2
    """

    def __init__(self, start: int = 1) -> None:
        """Start the sequence at ``start``."""
        self._values = itertools.count(start)
        self._value = next(self._values)

    @property
    def value(self) -> int:
        """Return the number the next rendered sub-widget will use."""
        return self._value

    def advance(self) -> int:
        """Move to the next number and return it."""
        self._value = next(self._values)
        return self._value


def get_widget_class(registry: WidgetFactory, widget_type: str) -> str:
    """Return the CSS class declared by ``widget_type``, or ``""``."""
    registered = registry.get(widget_type)
    if registered is None or not registered.css_class:
        return ""
    return registered.css_class


class MonsterWidget:
    """Composite widget rendering the configured widget list."""

    def __init__(self, host: Host, counter: RenderCounter | None = None) -> None:
        """Set the widget's display metadata.

        Parameters
        ----------
        host : Host
            Host whose registries, hooks and render entry point are used.
        counter : RenderCounter, optional
            Shared counter supplying sub-widget numbers; a fresh one is
            created when omitted.
        """
        self.host = host
        self.counter = counter or RenderCounter()
        self.id = MONSTER_WIDGET_ID
        self.name = host.translate("Monster", TEXT_DOMAIN)
        self.css_class = MONSTER_CSS_CLASS
        self.description = host.translate(
            "Test multiple widgets at the same time.", TEXT_DOMAIN
        )

    def widget_type(self) -> WidgetType:
        """Return the descriptor the host registers for this widget."""
        return WidgetType(
            id=self.id,
            name=self.name,
            render=self.render,
            css_class=self.css_class,
            description=self.description,
        )

    def widget(self, args: DisplayArgs, instance: WidgetSettings | None = None) -> None:
        """Render every configured sub-widget through the host.

        Parameters
        ----------
        args : DisplayArgs
            Display arguments for the sidebar the widget is placed in. Only
            ``args.id`` is trusted; the wrapper templates are re-read from the
            sidebar registry so every sub-widget can be formatted afresh. When
            the sidebar is not registered the passed wrappers are used as given.
        instance : Mapping, optional
            Saved settings of this placement. The Monster widget has none.

        Returns
        -------
        None
            Markup is written to the host output by each sub-widget.
        """
        sidebar = self.host.sidebars.get(args.id)
        base_args = sidebar.display_args() if sidebar is not None else args

        for spec in self.get_widget_config():
            number = self.counter.value
            sub_args = base_args
            if spec.widget_type == RECENT_POSTS:
                sub_args = dc.replace(
                    sub_args,
                    widget_id=RECENT_POSTS_CACHE_TEMPLATE.format(number=number),
                )
            if sidebar is not None:
                sub_args = dc.replace(
                    sub_args,
                    before_widget=sidebar.before_widget.format(
                        widget_id=PLACEHOLDER_ID_TEMPLATE.format(number=number),
                        widget_class=self.get_widget_class(spec.widget_type),
                    ),
                )
            logger.debug("rendering %s as sub-widget %d", spec.widget_type, number)
            self.host.the_widget(spec.widget_type, spec.settings, sub_args)
            self.counter.advance()

    def render(self, instance: WidgetSettings, args: DisplayArgs) -> None:
        """Adapt the host's ``render(settings, args)`` call order to :meth:`widget`."""
        self.widget(args, instance)

    def get_widget_config(self) -> list[WidgetSpec]:
        """Return a freshly built widget list for this render pass."""
        return get_widget_config(self.host)

    def get_widget_class(self, widget_type: str) -> str:
        """Return the CSS class the host declares for ``widget_type``."""
        return get_widget_class(self.host.widgets, widget_type)


def register_monster_widget(
    host: Host, *, counter: RenderCounter | None = None
) -> MonsterWidget:
    """Register the Monster widget type with ``host`` and return the widget."""
    monster = MonsterWidget(host, counter or RenderCounter())
    host.widgets.register(monster.widget_type())
    return monster


def install(host: Host) -> None:
    """Hook :func:`register_monster_widget` onto the host's ``widgets_init``."""
    host.hooks.add_action(WIDGETS_INIT, register_monster_widget)


__all__ = [
    "MonsterWidget",
    "RenderCounter",
    "get_widget_class",
    "install",
    "register_monster_widget",
]
