"""The sandbox host that owns registries, hooks and the page output stream.

A :class:`Host` bundles every collaborator a widget may call while it
renders: the widget type registry, the sidebar registry, the hook registry,
navigation menus, the translator and the smiley converter. Rendering is
synchronous and writes markup to :attr:`Host.output`.

Examples
--------
>>> from monster_widget.host import Host, Sidebar, WidgetType
>>> host = Host(sidebars=[Sidebar(id="sidebar-1", name="Sidebar")])
>>> host.widgets.register(WidgetType(id="hello", name="Hello", render=lambda s, a: "hi"))
>>> host.the_widget("hello", None, host.sidebars.get("sidebar-1").display_args())
>>> host.output.getvalue()
'hi'
"""

from __future__ import annotations

import dataclasses as dc
import io
import logging
import typing as typ

from .hooks import HookRegistry
from .i18n import Translator
from .models import DisplayArgs, NavMenu, NavMenuQueryError
from .registry import SidebarRegistry, WidgetFactory
from .smilies import SmileyConverter

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import Sidebar, WidgetSettings

logger = logging.getLogger(__name__)

WIDGETS_INIT = "widgets_init"

NavMenuSource = typ.Callable[[], "cabc.Iterable[NavMenu]"]


class Host:
    """Runtime environment widgets render against."""

    def __init__(
        self,
        *,
        sidebars: cabc.Iterable[Sidebar] = (),
        nav_menus: cabc.Iterable[NavMenu] | NavMenuSource = (),
        translator: Translator | None = None,
        smilies: SmileyConverter | None = None,
        output: typ.TextIO | None = None,
    ) -> None:
        """Create a host.

        Parameters
        ----------
        sidebars : Iterable[Sidebar], optional
            Sidebars to register up front.
        nav_menus : Iterable[NavMenu] or callable, optional
            Either a fixed collection of menus or a zero-argument callable
            queried on every :meth:`get_nav_menus` call; the callable may
            raise :class:`NavMenuQueryError`.
        translator : Translator, optional
            Translation lookup; defaults to an identity translator.
        smilies : SmileyConverter, optional
            Emoticon converter; defaults to the stock emoji table.
        output : TextIO, optional
            Stream rendered markup is written to; defaults to a
            :class:`io.StringIO` buffer.
        """
        self.widgets = WidgetFactory()
        self.sidebars = SidebarRegistry(sidebars)
        self.hooks = HookRegistry()
        self.translator = translator or Translator()
        self.smilies = smilies or SmileyConverter()
        self.output: typ.TextIO = output if output is not None else io.StringIO()
        if callable(nav_menus):
            self._nav_menu_source: NavMenuSource = nav_menus
        else:
            menus = tuple(nav_menus)
            self._nav_menu_source = lambda: menus
        self._started = False

    def start(self) -> None:
        """Fire ``widgets_init`` so widget types register themselves, once."""
        if self._started:
            return
        self._started = True
        self.hooks.do_action(WIDGETS_INIT, self)

    def translate(self, text: str, domain: str) -> str:
        """Return ``text`` translated within ``domain``."""
        return self.translator.translate(text, domain)

    def convert_smilies(self, text: str) -> str:
        """Return ``text`` with emoticons turned into emoji markup."""
        return self.smilies.convert(text)

    def get_nav_menus(self) -> list[NavMenu]:
        """Return every navigation menu the host knows about.

        Raises
        ------
        NavMenuQueryError
            If the underlying menu source fails.
        """
        try:
            return list(self._nav_menu_source())
        except NavMenuQueryError:
            raise
        except Exception as exc:
            msg = f"could not load navigation menus: {exc}"
            raise NavMenuQueryError(msg) from exc

    def get_nav_menu(self, menu_id: int) -> NavMenu | None:
        """Return the menu with ``menu_id``; ``None`` when unknown or unavailable."""
        try:
            menus = self.get_nav_menus()
        except NavMenuQueryError:
            return None
        return next((menu for menu in menus if menu.id == menu_id), None)

    def the_widget(
        self,
        widget_type: str,
        settings: WidgetSettings | None,
        args: DisplayArgs,
    ) -> None:
        """Render one widget of ``widget_type`` to :attr:`output`.

        Unregistered widget types render nothing.
        """
        registered = self.widgets.get(widget_type)
        if registered is None:
            logger.debug("skipping unregistered widget type %r", widget_type)
            return
        if args.widget_name is None:
            args = dc.replace(args, widget_name=registered.name)
        markup = registered.render(settings or {}, args)
        if markup:
            self.output.write(markup)

    def dynamic_sidebar(self, sidebar_id: str) -> bool:
        """Render every widget placed in ``sidebar_id``.

        Returns
        -------
        bool
            ``True`` when the sidebar exists and holds at least one widget.
        """
        sidebar = self.sidebars.get(sidebar_id)
        if sidebar is None or not sidebar.widgets:
            return False
        base_args = sidebar.display_args()
        for number, placement in enumerate(sidebar.widgets, start=1):
            registered = self.widgets.get(placement.widget_type)
            widget_id = f"{placement.widget_type}-{number}"
            css_class = (registered.css_class or "") if registered else ""
            args = dc.replace(
                base_args,
                before_widget=sidebar.before_widget.format(
                    widget_id=widget_id, widget_class=css_class
                ),
                widget_id=widget_id,
            )
            self.the_widget(placement.widget_type, placement.settings, args)
        return True

    def render_sidebar(self, sidebar_id: str) -> str:
        """Render ``sidebar_id`` into a fresh buffer and return the markup."""
        previous = self.output
        buffer = io.StringIO()
        self.output = buffer
        try:
            self.dynamic_sidebar(sidebar_id)
        finally:
            self.output = previous
        return buffer.getvalue()


__all__ = ["WIDGETS_INIT", "Host", "NavMenuSource"]
