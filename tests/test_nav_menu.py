"""Unit tests for choosing the navigation menu with the most links."""

from __future__ import annotations

import pytest

from monster_widget import MonsterWidget, RenderCounter, get_best_nav_menu
from monster_widget.host import (
    DisplayArgs,
    Host,
    NavMenu,
    NavMenuItem,
    NavMenuQueryError,
    Sidebar,
)


def _menu(menu_id: int, links: int) -> NavMenu:
    items = tuple(NavMenuItem(f"Link {n}", f"/{n}/") for n in range(links))
    return NavMenu(id=menu_id, name=f"Menu {menu_id}", items=items)


def test_no_menus_returns_none() -> None:
    """An empty menu collection yields no menu."""
    assert get_best_nav_menu(Host()) is None


def test_query_error_returns_none() -> None:
    """A failing menu query is treated as having no menus."""

    def _broken() -> list[NavMenu]:
        msg = "menus table missing"
        raise NavMenuQueryError(msg)

    assert get_best_nav_menu(Host(nav_menus=_broken)) is None


def test_unexpected_source_failure_is_reported_as_query_error() -> None:
    """Lookup failures inside a menu source surface as NavMenuQueryError."""

    def _broken() -> list[NavMenu]:
        return [{}["missing"]]

    host = Host(nav_menus=_broken)
    with pytest.raises(NavMenuQueryError):
        host.get_nav_menus()
    assert get_best_nav_menu(host) is None


def test_menus_without_links_return_none() -> None:
    """A best link count of zero yields no menu."""
    assert get_best_nav_menu(Host(nav_menus=[_menu(1, 0), _menu(2, 0)])) is None


def test_menu_with_most_links_wins() -> None:
    """With counts 3 and 9 the menu holding nine links is chosen."""
    best = get_best_nav_menu(Host(nav_menus=[_menu(1, 3), _menu(2, 9)]))
    assert best is not None
    assert best.id == 2, f"expected menu 2 with nine links, got {best!r}"
    assert best.link_count == 9


def test_order_of_menus_does_not_hide_the_maximum() -> None:
    """The busiest menu is found wherever it sits in the query result."""
    best = get_best_nav_menu(Host(nav_menus=[_menu(7, 9), _menu(8, 3), _menu(9, 1)]))
    assert best is not None
    assert best.id == 7


def test_ties_resolve_to_last_menu_in_query_order() -> None:
    """Menus sharing the highest count resolve to the later one."""
    best = get_best_nav_menu(Host(nav_menus=[_menu(1, 4), _menu(2, 4), _menu(3, 1)]))
    assert best is not None
    assert best.id == 2, "expected the later of two tied menus"


def test_nested_links_count_towards_the_total() -> None:
    """Child links are counted alongside their parents."""
    nested = NavMenu(
        id=4,
        name="Nested",
        items=(
            NavMenuItem("About", "/about/", children=(NavMenuItem("Team", "/team/"),)),
        ),
    )
    best = get_best_nav_menu(Host(nav_menus=[_menu(1, 1), nested]))
    assert best is nested
    assert nested.link_count == 2


@pytest.mark.parametrize(
    "error",
    [OSError("menu store unreachable"), RuntimeError("db down")],
    ids=["os-error", "runtime-error"],
)
def test_any_source_failure_means_no_menu(error: Exception) -> None:
    """Whatever a menu source raises is reported as a query error."""

    def _broken() -> list[NavMenu]:
        raise error

    host = Host(nav_menus=_broken)
    with pytest.raises(NavMenuQueryError) as excinfo:
        host.get_nav_menus()
    assert excinfo.value.__cause__ is error
    assert get_best_nav_menu(host) is None
    assert host.get_nav_menu(1) is None


def test_monster_render_survives_a_failing_menu_source() -> None:
    """A broken menu store drops the nav menu entry but the render completes."""

    def _broken() -> list[NavMenu]:
        msg = "menu store unreachable"
        raise OSError(msg)

    host = Host(sidebars=[Sidebar(id="sidebar-1", name="Sidebar")], nav_menus=_broken)
    counter = RenderCounter()
    MonsterWidget(host, counter).widget(DisplayArgs(id="sidebar-1"))
    assert counter.value == 14, "expected exactly the 13 fixed entries to render"
