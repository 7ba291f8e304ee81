"""gettext-backed translation lookups keyed by text domain."""

from __future__ import annotations

import gettext
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


class Translator:
    """Resolve translated strings from compiled ``.mo`` catalogs.

    Catalogs are looked up as ``<locale_dir>/<language>/LC_MESSAGES/<domain>.mo``.
    Domains without a catalog fall back to returning the source text, so a
    translator with no ``locale_dir`` acts as the identity function.
    """

    def __init__(
        self,
        locale_dir: Path | None = None,
        languages: cabc.Sequence[str] | None = None,
    ) -> None:
        """Configure the catalog directory and preferred languages."""
        self.locale_dir = locale_dir
        self.languages = list(languages) if languages else None
        self._catalogs: dict[str, gettext.NullTranslations] = {}

    def translate(self, text: str, domain: str) -> str:
        """Return ``text`` translated within ``domain``."""
        return self._catalog(domain).gettext(text)

    def _catalog(self, domain: str) -> gettext.NullTranslations:
        catalog = self._catalogs.get(domain)
        if catalog is None:
            catalog = gettext.translation(
                domain,
                localedir=self.locale_dir,
                languages=self.languages,
                fallback=True,
            )
            self._catalogs[domain] = catalog
        return catalog


__all__ = ["Translator"]
