"""Build the list of widgets a Monster widget renders.

The list starts with thirteen fixed entries covering the stock sidebar
widgets, gains a navigation menu entry when the host has a menu with links,
gains a links entry when the host registers a links widget, and is finally
handed to the ``monster-widget-config`` filter. Whatever the filter chain
returns is the list that gets rendered.

Examples
--------
>>> from monster_widget.host import Host
>>> specs = get_widget_config(Host())
>>> len(specs)
13
>>> specs[0].widget_type
'archives'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from ._constants import (
    BREAKER_SMILIES,
    CONFIG_FILTER,
    LARGE_IMAGE_URL,
    PIPE_RUN_LENGTH,
    RSS_FEED_URL,
    TEXT_DOMAIN,
    TEXT_FILTER,
)
from .host.builtin import (
    ARCHIVES,
    CALENDAR,
    CATEGORIES,
    LINKS,
    META,
    NAV_MENU,
    PAGES,
    RECENT_COMMENTS,
    RECENT_POSTS,
    RSS,
    SEARCH,
    TAG_CLOUD,
    TEXT,
)
from .host.models import NavMenuQueryError

if typ.TYPE_CHECKING:
    from .host.models import NavMenu, WidgetSettings
    from .host.runtime import Host

FILLER_TEXT = (
    "Hamburger fatback andouille, ball tip bacon t-bone turkey tenderloin. Ball "
    "tip shank pig, t-bone turducken prosciutto ground round rump bacon pork chop "
    "short loin turkey. Pancetta ball tip salami, hamburger t-bone capicola turkey "
    "ham hock pork belly tri-tip. Biltong bresaola tail, shoulder sausage turkey "
    "cow pork chop fatback. Turkey pork pig bacon short loin meatloaf, chicken ham "
    "hock flank andouille tenderloin shank rump filet mignon. Shoulder frankfurter "
    "shankle pancetta. Jowl andouille short ribs swine venison, pork loin pork "
    "chop meatball jerky filet mignon shoulder tenderloin chicken pork."
)


@dc.dataclass(frozen=True, slots=True)
class WidgetSpec:
    """One sub-widget to render: its type id and the settings it receives."""

    widget_type: str
    settings: WidgetSettings | None = None


def get_widget_config(host: Host) -> list[WidgetSpec]:
    """Return the ordered widget list for a single render pass.

    Parameters
    ----------
    host : Host
        Host supplying translations, navigation menus, registered widget
        types and the ``monster-widget-config`` filter chain.

    Returns
    -------
    list[WidgetSpec]
        The filtered widget list. It is rebuilt on every call because its
        composition depends on host state at render time.
    """

    def _(text: str) -> str:
        return host.translate(text, TEXT_DOMAIN)

    widgets = [
        WidgetSpec(ARCHIVES, {"title": _("Archives List"), "count": 1, "dropdown": 0}),
        WidgetSpec(
            ARCHIVES, {"title": _("Archives Dropdown"), "count": 1, "dropdown": 1}
        ),
        WidgetSpec(CALENDAR, {"title": _("Calendar")}),
        WidgetSpec(
            CATEGORIES,
            {
                "title": _("Categories List"),
                "count": 1,
                "hierarchical": 1,
                "dropdown": 0,
            },
        ),
        WidgetSpec(
            CATEGORIES,
            {
                "title": _("Categories Dropdown"),
                "count": 1,
                "hierarchical": 1,
                "dropdown": 1,
            },
        ),
        WidgetSpec(
            PAGES, {"title": _("Pages"), "sortby": "menu_order", "exclude": ""}
        ),
        WidgetSpec(META, {"title": _("Meta")}),
        WidgetSpec(RECENT_COMMENTS, {"title": _("Recent Comments"), "number": 7}),
        WidgetSpec(RECENT_POSTS, {"title": _("Recent Posts"), "number": 1}),
        WidgetSpec(
            RSS,
            {
                "title": _("RSS"),
                "url": RSS_FEED_URL,
                "items": 10,
                "show_author": True,
                "show_date": True,
                "show_summary": True,
            },
        ),
        WidgetSpec(SEARCH, {"title": _("Search")}),
        WidgetSpec(
            TEXT,
            {"title": _("Text"), "text": get_breaker_text(host), "filter": True},
        ),
        WidgetSpec(TAG_CLOUD, {"title": _("Tag Cloud"), "taxonomy": "post_tag"}),
    ]

    menu = get_best_nav_menu(host)
    if menu is not None:
        widgets.append(
            WidgetSpec(NAV_MENU, {"title": _("Nav Menu"), "nav_menu": menu.id})
        )

    if LINKS in host.widgets.keys():
        widgets.append(
            WidgetSpec(
                LINKS,
                {
                    "title": _("Links"),
                    "description": 1,
                    "name": 1,
                    "rating": 1,
                    "images": 1,
                },
            )
        )

    return host.hooks.apply_filters(CONFIG_FILTER, widgets)


def get_best_nav_menu(host: Host) -> NavMenu | None:
    """Return the navigation menu with the most links.

    Returns ``None`` when the menu query fails, when there are no menus, or
    when the best menu has no links. When several menus share the highest
    link count the last of them in query order is chosen.
    """
    try:
        menus = host.get_nav_menus()
    except NavMenuQueryError:
        return None
    best: NavMenu | None = None
    for menu in menus:
        if best is None or menu.link_count >= best.link_count:
            best = menu
    if best is None or best.link_count == 0:
        return None
    return best


def get_breaker_text(host: Host) -> str:
    """Return HTML built to push the limits of a sidebar layout.

    The block holds a hard-coded large image, a large image inside a caption,
    a long paragraph, a run of pipes with no break opportunities and a line
    of converted emoticons, each preceded by a bold label. The result passes
    through the ``monster-widget-get-text`` filter.
    """

    def _(text: str) -> str:
        return host.translate(text, TEXT_DOMAIN)

    caption = _("This image is 900 by 598 pixels.")
    html = [
        f"<strong>{_('Large image: Hand Coded')}</strong>",
        f'<img src="{LARGE_IMAGE_URL}">',
        f"<strong>{_('Large image: linked in a caption')}</strong>",
        (
            '<div class="wp-caption alignnone"><a href="#">'
            f'<img src="{LARGE_IMAGE_URL}" class="size-large" height="598" width="900">'
            f'</a><p class="wp-caption-text">{caption}</p></div>'
        ),
        f"<strong>{_('Meat!')}</strong>",
        _(FILLER_TEXT),
        f"<strong>{_('Pipe Test')}</strong>",
        "|" * PIPE_RUN_LENGTH,
        f"<strong>{_('Smile!')}</strong>",
        " ".join(host.convert_smilies(token) for token in BREAKER_SMILIES),
    ]
    return host.hooks.apply_filters(TEXT_FILTER, "\n".join(html))


__all__ = [
    "FILLER_TEXT",
    "WidgetSpec",
    "get_best_nav_menu",
    "get_breaker_text",
    "get_widget_config",
]
