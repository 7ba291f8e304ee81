"""Shared fixtures for Monster widget tests.

The fixtures build a bare :class:`~monster_widget.host.Host` with one sidebar
and, where needed, stub widget types that record every render call instead
of producing real markup. This keeps the composite widget's behaviour
observable without depending on the stock widget templates.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import pytest

from monster_widget.host import DisplayArgs, Host, Sidebar, WidgetType

if typ.TYPE_CHECKING:
    import collections.abc as cabc

SIDEBAR_TEMPLATE = '<li id="{widget_id}" class="widget {widget_class}">'


@dc.dataclass(slots=True)
class RenderCall:
    """One recorded call into a stub widget's render function."""

    widget_type: str
    settings: typ.Mapping[str, typ.Any]
    args: DisplayArgs


class RecordingWidgets:
    """Register stub widget types that record how they were rendered."""

    def __init__(self, host: Host) -> None:
        self.host = host
        self.calls: list[RenderCall] = []

    def register(self, widget_type: str, css_class: str | None = None) -> None:
        """Register a stub ``widget_type`` that records and echoes its wrapper."""

        def _render(settings: typ.Mapping[str, typ.Any], args: DisplayArgs) -> str:
            self.calls.append(RenderCall(widget_type, settings, args))
            return f"{args.before_widget}{widget_type}{args.after_widget}\n"

        self.host.widgets.register(
            WidgetType(id=widget_type, name=widget_type, render=_render, css_class=css_class)
        )

    def register_many(self, widget_types: cabc.Iterable[str]) -> None:
        """Register one stub per identifier, each with a ``widget_<id>`` class."""
        for widget_type in widget_types:
            self.register(widget_type, css_class=f"widget_{widget_type}")

    @property
    def before_widgets(self) -> list[str]:
        """Return the formatted wrapper each recorded call received."""
        return [call.args.before_widget for call in self.calls]


@pytest.fixture
def sidebar() -> Sidebar:
    """Return the sidebar every test host registers."""
    return Sidebar(
        id="sidebar-1",
        name="Sidebar",
        before_widget=SIDEBAR_TEMPLATE,
        after_widget="</li>",
        before_title="<h3>",
        after_title="</h3>",
    )


@pytest.fixture
def host(sidebar: Sidebar) -> Host:
    """Return a host with one sidebar and no widget types."""
    return Host(sidebars=[sidebar])


@pytest.fixture
def recorder(host: Host) -> RecordingWidgets:
    """Return a stub widget recorder bound to ``host``."""
    return RecordingWidgets(host)
