"""Sandbox host the Monster widget renders against.

The host supplies the collaborators a composite widget needs: a widget type
registry, a sidebar registry, named filter and action hooks, navigation
menus, translations, emoticon conversion and the stock widget renderers used
to preview a sidebar.
"""

from .builtin import CoreWidgets, register_core_widgets
from .content import Category, Comment, Link, Page, Post, SiteContent, Tag
from .feeds import FeedError, FeedItem, FeedReader
from .hooks import HookRegistry
from .i18n import Translator
from .models import (
    DisplayArgs,
    NavMenu,
    NavMenuItem,
    NavMenuQueryError,
    Sidebar,
    WidgetPlacement,
    WidgetSettings,
    WidgetType,
)
from .registry import SidebarRegistry, WidgetFactory
from .runtime import WIDGETS_INIT, Host
from .smilies import SmileyConverter

__all__ = [
    "WIDGETS_INIT",
    "Category",
    "Comment",
    "CoreWidgets",
    "DisplayArgs",
    "FeedError",
    "FeedItem",
    "FeedReader",
    "HookRegistry",
    "Host",
    "Link",
    "NavMenu",
    "NavMenuItem",
    "NavMenuQueryError",
    "Page",
    "Post",
    "Sidebar",
    "SidebarRegistry",
    "SiteContent",
    "SmileyConverter",
    "Tag",
    "Translator",
    "WidgetFactory",
    "WidgetPlacement",
    "WidgetSettings",
    "WidgetType",
    "register_core_widgets",
]
