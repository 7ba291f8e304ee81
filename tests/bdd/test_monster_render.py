"""Behaviour tests for rendering the Monster widget.

These pytest-bdd scenarios follow ``monster_render.feature``: the fixed
widget list on a bare host, choosing the busiest navigation menu, and the
placeholder ids handed to each rendered sub-widget.

Usage
-----
Run ``pytest tests/bdd/test_monster_render.py -v`` after installing the test
extra (``pip install -e .[test]``). The scenarios use stub widget types and
need no network access.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from pytest_bdd import given, scenarios, then, when

from monster_widget import (
    MonsterWidget,
    RenderCounter,
    WidgetSpec,
    get_best_nav_menu,
    get_widget_config,
)
from monster_widget._constants import CONFIG_FILTER
from monster_widget.host import DisplayArgs, Host, NavMenu, NavMenuItem, Sidebar, WidgetType

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "monster_render.feature"
)
scenarios(FEATURE_FILE)

FIXED_TYPES = [
    "archives",
    "archives",
    "calendar",
    "categories",
    "categories",
    "pages",
    "meta",
    "recent-comments",
    "recent-posts",
    "rss",
    "search",
    "text",
    "tag_cloud",
]

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _menu(menu_id: int, links: int) -> NavMenu:
    items = tuple(NavMenuItem(f"Link {n}", f"/{n}/") for n in range(links))
    return NavMenu(id=menu_id, name=f"Menu {menu_id}", items=items)


@given("a host without navigation menus or a links widget")
def given_bare_host(scenario_state: ScenarioState) -> None:
    """Create a host with no menus and no registered widget types."""
    scenario_state["host"] = Host()


@given("a host with menus holding 3 and 9 links")
def given_host_with_menus(scenario_state: ScenarioState) -> None:
    """Create a host exposing two navigation menus."""
    scenario_state["host"] = Host(nav_menus=[_menu(1, 3), _menu(2, 9)])


@given("a host whose widget list is filtered down to two entries")
def given_filtered_host(scenario_state: ScenarioState) -> None:
    """Create a host with two stub widgets and a filter selecting only them."""
    host = Host(sidebars=[Sidebar(id="sidebar-1", name="Sidebar")])
    rendered: list[str] = []

    def _stub(settings: typ.Mapping[str, typ.Any], args: DisplayArgs) -> None:
        rendered.append(args.before_widget)

    for widget_type in ("search", "meta"):
        host.widgets.register(WidgetType(id=widget_type, name=widget_type, render=_stub))
    host.hooks.add_filter(
        CONFIG_FILTER, lambda _specs: [WidgetSpec("search"), WidgetSpec("meta")]
    )
    scenario_state["host"] = host
    scenario_state["rendered"] = rendered


@when("the Monster widget builds its widget list")
def when_build_list(scenario_state: ScenarioState) -> None:
    """Build the widget list for the scenario host."""
    scenario_state["specs"] = get_widget_config(scenario_state["host"])


@when("the best navigation menu is selected")
def when_select_menu(scenario_state: ScenarioState) -> None:
    """Pick the best navigation menu on the scenario host."""
    scenario_state["menu"] = get_best_nav_menu(scenario_state["host"])


@when("the Monster widget renders in the sidebar")
def when_render(scenario_state: ScenarioState) -> None:
    """Render a Monster widget starting from a fresh counter."""
    counter = RenderCounter()
    MonsterWidget(scenario_state["host"], counter).widget(DisplayArgs(id="sidebar-1"))
    scenario_state["counter"] = counter


@then("the list holds exactly the 13 fixed entries in order")
def then_fixed_entries(scenario_state: ScenarioState) -> None:
    """Verify the unfiltered list is the fixed entries only."""
    specs = typ.cast("list[WidgetSpec]", scenario_state["specs"])
    assert [spec.widget_type for spec in specs] == FIXED_TYPES, (
        f"unexpected widget list: {[spec.widget_type for spec in specs]}"
    )


@then("the menu with 9 links is returned")
def then_best_menu(scenario_state: ScenarioState) -> None:
    """Verify the busiest menu was chosen."""
    menu = typ.cast("NavMenu | None", scenario_state["menu"])
    assert menu is not None, "expected a navigation menu"
    assert menu.link_count == 9, f"expected the 9-link menu, got {menu!r}"


@then('the host renders "monster-widget-placeholder-1" and "monster-widget-placeholder-2"')
def then_placeholder_ids(scenario_state: ScenarioState) -> None:
    """Verify each stub received its placeholder id in order."""
    rendered = typ.cast("list[str]", scenario_state["rendered"])
    assert [markup.split('"')[1] for markup in rendered] == [
        "monster-widget-placeholder-1",
        "monster-widget-placeholder-2",
    ]


@then("the render counter ends at 3")
def then_counter(scenario_state: ScenarioState) -> None:
    """Verify the counter advanced once per rendered widget."""
    counter = typ.cast("RenderCounter", scenario_state["counter"])
    assert counter.value == 3
