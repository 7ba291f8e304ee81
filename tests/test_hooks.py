"""Unit tests for named filter and action chains."""

from __future__ import annotations

from monster_widget.host import HookRegistry


def test_unhooked_filter_returns_value_unchanged() -> None:
    """Applying a filter nobody listens to is the identity."""
    value = ["a"]
    assert HookRegistry().apply_filters("nothing", value) is value


def test_filters_run_in_registration_order() -> None:
    """Callbacks of equal priority compose in the order they were added."""
    hooks = HookRegistry()
    hooks.add_filter("name", lambda text: text + "1")
    hooks.add_filter("name", lambda text: text + "2")
    assert hooks.apply_filters("name", "x") == "x12"


def test_lower_priority_runs_first() -> None:
    """Priorities order the chain before registration order does."""
    hooks = HookRegistry()
    hooks.add_filter("name", lambda text: text + "late", priority=20)
    hooks.add_filter("name", lambda text: text + "early", priority=5)
    assert hooks.apply_filters("name", "") == "earlylate"


def test_extra_arguments_are_forwarded() -> None:
    """Context arguments reach every callback unchanged."""
    hooks = HookRegistry()
    hooks.add_filter("name", lambda value, factor: value * factor)
    hooks.add_filter("name", lambda value, factor: value + factor)
    assert hooks.apply_filters("name", 2, 3) == 9


def test_remove_filter_detaches_callback() -> None:
    """Removed callbacks no longer take part in the chain."""
    hooks = HookRegistry()

    def _shout(text: str) -> str:
        return text.upper()

    hooks.add_filter("name", _shout)
    assert hooks.has_filter("name")
    assert hooks.remove_filter("name", _shout) is True
    assert hooks.remove_filter("name", _shout) is False
    assert hooks.apply_filters("name", "quiet") == "quiet"
    assert not hooks.has_filter("name")


def test_actions_fire_callbacks_and_count() -> None:
    """Actions call every callback with the given arguments and track firings."""
    hooks = HookRegistry()
    seen: list[tuple[str, int]] = []
    hooks.add_action("boot", lambda value: seen.append(("second", value)), priority=11)
    hooks.add_action("boot", lambda value: seen.append(("first", value)))
    hooks.do_action("boot", 7)
    assert seen == [("first", 7), ("second", 7)]
    assert hooks.did_action("boot") == 1
    assert hooks.did_action("never") == 0
