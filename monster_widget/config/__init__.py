"""Load and validate preview site configuration YAML.

This subpackage parses a ``monster.yaml`` file describing the sandbox site a
Monster widget is previewed on: sidebars and their wrapper templates,
navigation menus, switches for the stock widgets, translation catalogs and
sample content. The primary entry point is :func:`load_site_config`, which
returns a :class:`SiteConfig` ready for :func:`monster_widget.sandbox.build_host`.

Examples
--------
>>> from pathlib import Path
>>> from monster_widget.config import load_site_config
>>> site = load_site_config(Path("config/monster.yaml"))  # doctest: +SKIP
>>> site.get_sidebar("sidebar-1").name  # doctest: +SKIP
'Primary Sidebar'
"""

from .loader import load_site_config
from .models import LocaleConfig, SiteConfig, SiteConfigError, WidgetOptions

__all__ = [
    "LocaleConfig",
    "SiteConfig",
    "SiteConfigError",
    "WidgetOptions",
    "load_site_config",
]
