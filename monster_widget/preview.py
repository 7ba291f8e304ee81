"""Monster widget preview page rendering pipeline.

This module turns a preview site configuration into a standalone HTML page
with every configured sidebar rendered through the sandbox host, so a
theme's widget styles can be checked against the Monster widget's output.
The main entry point is ``MonsterPreviewBuilder``.

Typical usage mirrors the CLI:

>>> from pathlib import Path
>>> from monster_widget.config import load_site_config
>>> from monster_widget.sandbox import build_host
>>> site = load_site_config(Path("config/monster.yaml"))  # doctest: +SKIP
>>> builder = MonsterPreviewBuilder(site, build_host(site))  # doctest: +SKIP
>>> builder.run()  # doctest: +SKIP
PosixPath('public/monster.html')

The builder expects templates to reside under ``monster_widget/templates``
unless a custom directory is provided. It relies on Jinja2 with autoescape
enabled and produces UTF-8 encoded files.
"""

from __future__ import annotations

import datetime as dt
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import TEXT_DOMAIN

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .host import Host


class MonsterPreviewBuilder:
    """Render the preview page from a site config and a started host."""

    def __init__(
        self,
        site_config: SiteConfig,
        host: Host,
        *,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and Jinja environment.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed preview site configuration; provides the page title,
            stylesheet, sidebars and output path.
        host : Host
            Started host with the stock widgets and the Monster widget
            registered.
        templates_dir : Path, optional
            Directory containing Jinja templates. Defaults to
            ``monster_widget/templates``.
        """
        self.site_config = site_config
        self.host = host
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("preview_page.jinja")

    def render(self) -> str:
        """Return the preview page HTML, ending with a newline."""
        sidebars = [
            {
                "id": sidebar.id,
                "name": sidebar.name,
                "html": self.host.render_sidebar(sidebar.id),
            }
            for sidebar in self.host.sidebars
        ]
        context = {
            "title": self.site_config.title,
            "language": self.site_config.language,
            "stylesheet": self.site_config.stylesheet,
            "sidebars": sidebars,
            "generated_at": dt.datetime.now(dt.UTC),
            "_": lambda text: self.host.translate(text, TEXT_DOMAIN),
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def run(self, output: Path | None = None) -> Path:
        """Render and write the preview HTML, returning the output path."""
        output_path = output or self.site_config.output
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(), encoding="utf-8")
        return output_path


__all__ = ["MonsterPreviewBuilder"]
