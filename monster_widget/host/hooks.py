"""Named filter and action chains that let outside code adjust host values.

A filter is a named pipeline: every callback registered against the name
receives the value produced by the previous one and returns its replacement.
Actions are the same chain without a threaded value. Callbacks run by
ascending priority and, within one priority, in registration order.

Examples
--------
>>> hooks = HookRegistry()
>>> hooks.add_filter("greeting", lambda text: text.upper())
>>> hooks.apply_filters("greeting", "hi")
'HI'
>>> hooks.apply_filters("unhooked", 3)
3
"""

from __future__ import annotations

import dataclasses as dc
import itertools
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_PRIORITY = 10


@dc.dataclass(frozen=True, slots=True)
class _Hook:
    priority: int
    sequence: int
    callback: cabc.Callable[..., typ.Any]


class HookRegistry:
    """Registry of filter and action callbacks keyed by hook name."""

    def __init__(self) -> None:
        """Create an empty registry."""
        self._filters: dict[str, list[_Hook]] = {}
        self._actions: dict[str, list[_Hook]] = {}
        self._sequence = itertools.count()
        self._fired: dict[str, int] = {}

    def add_filter(
        self,
        name: str,
        callback: cabc.Callable[..., typ.Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Attach ``callback`` to the filter chain called ``name``."""
        self._add(self._filters, name, callback, priority)

    def remove_filter(
        self, name: str, callback: cabc.Callable[..., typ.Any]
    ) -> bool:
        """Detach ``callback`` from ``name``; return whether it was attached."""
        return self._remove(self._filters, name, callback)

    def has_filter(self, name: str) -> bool:
        """Return ``True`` when at least one callback is attached to ``name``."""
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: typ.Any, *args: typ.Any) -> typ.Any:
        """Pass ``value`` through every callback attached to ``name``.

        Parameters
        ----------
        name : str
            Filter name.
        value : Any
            Initial value handed to the first callback.
        *args : Any
            Extra positional context forwarded unchanged to every callback.

        Returns
        -------
        Any
            The value returned by the last callback, or ``value`` itself when
            nothing is attached.
        """
        for hook in self._ordered(self._filters, name):
            value = hook.callback(value, *args)
        return value

    def add_action(
        self,
        name: str,
        callback: cabc.Callable[..., typ.Any],
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Attach ``callback`` to the action called ``name``."""
        self._add(self._actions, name, callback, priority)

    def remove_action(
        self, name: str, callback: cabc.Callable[..., typ.Any]
    ) -> bool:
        """Detach ``callback`` from ``name``; return whether it was attached."""
        return self._remove(self._actions, name, callback)

    def do_action(self, name: str, *args: typ.Any) -> None:
        """Invoke every callback attached to the action ``name``."""
        self._fired[name] = self._fired.get(name, 0) + 1
        for hook in self._ordered(self._actions, name):
            hook.callback(*args)

    def did_action(self, name: str) -> int:
        """Return how many times the action ``name`` has fired."""
        return self._fired.get(name, 0)

    def _add(
        self,
        table: dict[str, list[_Hook]],
        name: str,
        callback: cabc.Callable[..., typ.Any],
        priority: int,
    ) -> None:
        hook = _Hook(priority=priority, sequence=next(self._sequence), callback=callback)
        table.setdefault(name, []).append(hook)

    @staticmethod
    def _remove(
        table: dict[str, list[_Hook]],
        name: str,
        callback: cabc.Callable[..., typ.Any],
    ) -> bool:
        hooks = table.get(name, [])
        for index, hook in enumerate(hooks):
            if hook.callback == callback:
                del hooks[index]
                return True
        return False

    @staticmethod
    def _ordered(table: dict[str, list[_Hook]], name: str) -> list[_Hook]:
        # Snapshot so callbacks may add or remove hooks while the chain runs.
        return sorted(table.get(name, []), key=lambda hook: (hook.priority, hook.sequence))


__all__ = ["DEFAULT_PRIORITY", "HookRegistry"]
