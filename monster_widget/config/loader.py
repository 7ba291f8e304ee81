"""Load preview site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import (
    _build_content,
    _build_nav_menus,
    _build_sidebars,
    _optional_str,
    _require_list,
    _require_mapping,
)
from .models import LocaleConfig, SiteConfig, SiteConfigError, WidgetOptions


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing a Monster widget preview site.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/monster.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with sidebars, navigation menus, widget switches
        and sample content. Relative ``output`` and ``locale.dir`` paths are
        resolved against the configuration file's directory.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or a required field is missing.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from monster_widget.config import load_site_config
    >>> config = load_site_config(Path("config/monster.yaml"))  # doctest: +SKIP
    >>> [sidebar.id for sidebar in config.sidebars]  # doctest: +SKIP
    ['sidebar-1', 'sidebar-2']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base_dir = path.parent

    site = _require_mapping(raw.get("site"), "site")
    defaults = SiteConfig()
    output = Path(raw.get("output") or defaults.output)

    return SiteConfig(
        title=str(site.get("title") or defaults.title),
        language=str(site.get("language") or defaults.language),
        stylesheet=_optional_str(site.get("stylesheet")),
        output=output if output.is_absolute() else base_dir / output,
        locale=_build_locale(raw.get("locale"), base_dir),
        widgets=_build_widget_options(raw.get("widgets")),
        sidebars=_build_sidebars(raw.get("sidebars")),
        nav_menus=_build_nav_menus(raw.get("nav_menus")),
        content=_build_content(raw.get("content")),
    )


def _build_locale(raw: object, base_dir: Path) -> LocaleConfig:
    """Build the locale block, resolving the catalog directory."""
    data = _require_mapping(raw, "locale")
    locale_dir = _optional_str(data.get("dir"))
    languages = data.get("languages")
    if isinstance(languages, str):
        languages = [languages]
    resolved_dir: Path | None = None
    if locale_dir:
        resolved_dir = Path(locale_dir)
        if not resolved_dir.is_absolute():
            resolved_dir = base_dir / resolved_dir
    return LocaleConfig(
        locale_dir=resolved_dir,
        languages=[str(item) for item in _require_list(languages, "locale.languages")],
    )


def _build_widget_options(raw: object) -> WidgetOptions:
    """Build the stock widget switches."""
    data = _require_mapping(raw, "widgets")
    defaults = WidgetOptions()
    timeout = data.get("feed_timeout", defaults.feed_timeout)
    try:
        feed_timeout = float(timeout)
    except (TypeError, ValueError) as exc:
        msg = f"'widgets.feed_timeout' must be a number, got {timeout!r}."
        raise SiteConfigError(msg) from exc
    return WidgetOptions(
        links=bool(data.get("links", defaults.links)),
        fetch_feeds=bool(data.get("fetch_feeds", defaults.fetch_feeds)),
        feed_timeout=feed_timeout,
    )


__all__ = ["load_site_config"]
