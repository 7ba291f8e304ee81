"""Cyclopts CLI entrypoint for previewing the Monster widget.

The ``monster`` console script defined here renders a standalone preview
page with the Monster widget placed in every configured sidebar, and lists
the widgets a Monster widget would render for a given site configuration.

Examples
--------
Render the preview page for the default configuration:

>>> from monster_widget.cli import main
>>> main()  # doctest: +SKIP

List the configured widgets without rendering:

>>> from monster_widget.cli import app
>>> app(["widgets", "--config", "config/monster.yaml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .preview import MonsterPreviewBuilder
from .sandbox import build_host
from .widget_config import get_widget_config

DEFAULT_CONFIG = Path("config/monster.yaml")

app = App(name="monster", config=cyclopts.config.Env("MONSTER_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render a preview page with the Monster widget in every sidebar.")
def preview(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="MONSTER_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the output file", env_var="MONSTER_OUTPUT"),
    ] = None,
    offline: typ.Annotated[
        bool, Parameter(help="Skip fetching RSS feeds", env_var="MONSTER_OFFLINE")
    ] = False,
    verbose: bool = False,
) -> None:
    """Render the preview page for the requested site configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``monster.yaml`` configuration file (overridable via
        ``MONSTER_CONFIG``).
    output : Path or None, optional
        Write the page here instead of the configured ``output`` path.
    offline : bool, optional
        When ``True`` the RSS widget renders an error notice instead of
        fetching its feed.
    verbose : bool, optional
        Log each sub-widget render at debug level.

    Returns
    -------
    None
        Writes the rendered page and prints its path.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    host = build_host(site_config, fetch_feeds=False if offline else None)
    written = MonsterPreviewBuilder(site_config, host).run(output)
    print(f"wrote {_format_path(written)}")


@app.command(help="List the widgets a Monster widget renders for a site config.")
def widgets(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="MONSTER_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print one ``<type>: <title>`` line per configured sub-widget."""
    site_config = load_site_config(config)
    host = build_host(site_config, fetch_feeds=False)
    for spec in get_widget_config(host):
        title = (spec.settings or {}).get("title", "")
        print(f"{spec.widget_type}: {title}")


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """Invoke the Cyclopts application that powers the ``monster`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
