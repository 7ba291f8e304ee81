"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from monster_widget.host.content import (
    Category,
    Comment,
    Link,
    Page,
    Post,
    SiteContent,
    Tag,
)
from monster_widget.host.models import (
    NavMenu,
    NavMenuItem,
    Sidebar,
    WidgetPlacement,
)

from .models import SiteConfigError

DEFAULT_SIDEBAR_ID = "sidebar-1"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, raising otherwise."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{where}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _require_list(value: object, where: str) -> list[typ.Any]:
    """Return ``value`` when it is a list, raising otherwise."""
    if value is None:
        return []
    if not isinstance(value, list):
        msg = f"'{where}' must be a list."
        raise SiteConfigError(msg)
    return value


def _as_int(value: object, where: str, default: int | None = None) -> int:
    """Coerce ``value`` to int, raising a config error when impossible."""
    if value is None:
        if default is None:
            msg = f"'{where}' is required."
            raise SiteConfigError(msg)
        return default
    try:
        return int(typ.cast("typ.SupportsInt", value))
    except (TypeError, ValueError) as exc:
        msg = f"'{where}' must be an integer, got {value!r}."
        raise SiteConfigError(msg) from exc


def _optional_int(value: object, where: str) -> int | None:
    """Coerce ``value`` to int, keeping None."""
    if value is None:
        return None
    return _as_int(value, where)


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


def _build_sidebars(raw: object) -> list[Sidebar]:
    """Build sidebars from the ``sidebars`` mapping, or the default sidebar."""
    payload = _require_mapping(raw, "sidebars")
    if not payload:
        return [
            Sidebar(
                id=DEFAULT_SIDEBAR_ID,
                name="Sidebar",
                widgets=(WidgetPlacement("monster"),),
            )
        ]
    defaults = Sidebar(id="", name="")
    sidebars: list[Sidebar] = []
    for key, entry in payload.items():
        data = _require_mapping(entry, f"sidebars.{key}")
        placements = tuple(
            _build_placement(item, f"sidebars.{key}.widgets[{index}]")
            for index, item in enumerate(
                _require_list(data.get("widgets", [{"type": "monster"}]),
                              f"sidebars.{key}.widgets")
            )
        )
        sidebars.append(
            Sidebar(
                id=str(key),
                name=str(data.get("name") or str(key).replace("-", " ").title()),
                before_widget=data.get("before_widget", defaults.before_widget),
                after_widget=data.get("after_widget", defaults.after_widget),
                before_title=data.get("before_title", defaults.before_title),
                after_title=data.get("after_title", defaults.after_title),
                widgets=placements,
            )
        )
    return sidebars


def _build_placement(raw: object, where: str) -> WidgetPlacement:
    """Build a placement from ``{type, settings}`` or a bare type name."""
    if isinstance(raw, str):
        return WidgetPlacement(raw)
    data = _require_mapping(raw, where)
    widget_type = _optional_str(data.get("type"))
    if widget_type is None:
        msg = f"'{where}' is missing 'type'."
        raise SiteConfigError(msg)
    settings = dict(_require_mapping(data.get("settings"), f"{where}.settings"))
    return WidgetPlacement(widget_type, settings)


def _build_nav_menus(raw: object) -> list[NavMenu]:
    """Build navigation menus from the ``nav_menus`` list."""
    menus: list[NavMenu] = []
    for index, entry in enumerate(_require_list(raw, "nav_menus")):
        where = f"nav_menus[{index}]"
        data = _require_mapping(entry, where)
        menus.append(
            NavMenu(
                id=_as_int(data.get("id"), f"{where}.id"),
                name=str(data.get("name") or f"Menu {index + 1}"),
                items=_build_menu_items(data.get("items"), f"{where}.items"),
            )
        )
    return menus


def _build_menu_items(raw: object, where: str) -> tuple[NavMenuItem, ...]:
    items: list[NavMenuItem] = []
    for index, entry in enumerate(_require_list(raw, where)):
        data = _require_mapping(entry, f"{where}[{index}]")
        items.append(
            NavMenuItem(
                label=str(data.get("label") or ""),
                url=str(data.get("url") or "#"),
                children=_build_menu_items(
                    data.get("children"), f"{where}[{index}].children"
                ),
            )
        )
    return tuple(items)


def _build_content(raw: object) -> SiteContent:
    """Build the sample content snapshot from the ``content`` mapping."""
    data = _require_mapping(raw, "content")
    home_url = str(data.get("home_url") or "/")
    base = home_url.rstrip("/")

    posts = []
    for index, entry in enumerate(_require_list(data.get("posts"), "content.posts")):
        where = f"content.posts[{index}]"
        item = _require_mapping(entry, where)
        post_id = _as_int(item.get("id"), f"{where}.id", default=index + 1)
        published = _parse_timestamp(item.get("published"))
        if published is None:
            msg = f"'{where}.published' must be an ISO 8601 timestamp."
            raise SiteConfigError(msg)
        posts.append(
            Post(
                id=post_id,
                title=str(item.get("title") or ""),
                url=str(item.get("url") or f"{base}/?p={post_id}"),
                published=published,
                author=str(item.get("author") or ""),
            )
        )

    pages = []
    for index, entry in enumerate(_require_list(data.get("pages"), "content.pages")):
        where = f"content.pages[{index}]"
        item = _require_mapping(entry, where)
        page_id = _as_int(item.get("id"), f"{where}.id", default=index + 1)
        pages.append(
            Page(
                id=page_id,
                title=str(item.get("title") or ""),
                url=str(item.get("url") or f"{base}/?page_id={page_id}"),
                menu_order=_as_int(item.get("menu_order"), f"{where}.menu_order", 0),
                parent=_optional_int(item.get("parent"), f"{where}.parent"),
            )
        )

    categories = []
    for index, entry in enumerate(
        _require_list(data.get("categories"), "content.categories")
    ):
        where = f"content.categories[{index}]"
        item = _require_mapping(entry, where)
        category_id = _as_int(item.get("id"), f"{where}.id", default=index + 1)
        categories.append(
            Category(
                id=category_id,
                name=str(item.get("name") or ""),
                url=str(item.get("url") or f"{base}/?cat={category_id}"),
                count=_as_int(item.get("count"), f"{where}.count", 0),
                parent=_optional_int(item.get("parent"), f"{where}.parent"),
            )
        )

    tags = []
    for index, entry in enumerate(_require_list(data.get("tags"), "content.tags")):
        where = f"content.tags[{index}]"
        item = _require_mapping(entry, where)
        name = str(item.get("name") or "")
        tags.append(
            Tag(
                name=name,
                url=str(item.get("url") or f"{base}/?tag={name.lower()}"),
                count=_as_int(item.get("count"), f"{where}.count", 0),
            )
        )

    comments = []
    for index, entry in enumerate(
        _require_list(data.get("comments"), "content.comments")
    ):
        where = f"content.comments[{index}]"
        item = _require_mapping(entry, where)
        comments.append(
            Comment(
                author=str(item.get("author") or ""),
                post_id=_as_int(item.get("post_id"), f"{where}.post_id"),
                published=_parse_timestamp(item.get("published")),
            )
        )

    links = []
    for index, entry in enumerate(_require_list(data.get("links"), "content.links")):
        where = f"content.links[{index}]"
        item = _require_mapping(entry, where)
        links.append(
            Link(
                name=str(item.get("name") or ""),
                url=str(item.get("url") or "#"),
                description=str(item.get("description") or ""),
                rating=_as_int(item.get("rating"), f"{where}.rating", 0),
                image=_optional_str(item.get("image")),
            )
        )

    return SiteContent(
        home_url=home_url,
        posts=posts,
        pages=pages,
        categories=categories,
        tags=tags,
        comments=comments,
        links=links,
    )


__all__ = [
    "DEFAULT_SIDEBAR_ID",
    "_as_int",
    "_build_content",
    "_build_nav_menus",
    "_build_placement",
    "_build_sidebars",
    "_optional_int",
    "_optional_str",
    "_parse_timestamp",
    "_require_list",
    "_require_mapping",
]
