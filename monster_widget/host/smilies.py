"""Convert text emoticons into emoji markup."""

from __future__ import annotations

import re
import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

DEFAULT_SMILIES: dict[str, str] = {
    ":)": "\U0001f642",
    ":-)": "\U0001f642",
    ";)": "\U0001f609",
    ";-)": "\U0001f609",
    ":D": "\U0001f600",
    ":-D": "\U0001f600",
    ":(": "\U0001f641",
    ":-(": "\U0001f641",
    ":P": "\U0001f61b",
    ":-P": "\U0001f61b",
    ":o": "\U0001f62e",
    ":-o": "\U0001f62e",
    ":?:": "❓",
    ":!:": "❗",
}


class SmileyConverter:
    """Replace whitespace-delimited emoticon tokens with emoji spans.

    Examples
    --------
    >>> SmileyConverter().convert("ok :)")
    'ok <span class="wp-smiley" role="img" aria-label=":)">\U0001f642</span>'
    >>> SmileyConverter().convert("a:)b")
    'a:)b'
    """

    def __init__(self, smilies: cabc.Mapping[str, str] | None = None) -> None:
        """Build the token pattern, longest tokens first."""
        self.smilies = dict(DEFAULT_SMILIES if smilies is None else smilies)
        tokens = sorted(self.smilies, key=len, reverse=True)
        alternation = "|".join(re.escape(token) for token in tokens)
        self._pattern = (
            re.compile(rf"(?<!\S)({alternation})(?!\S)") if tokens else None
        )

    def convert(self, text: str) -> str:
        """Return ``text`` with every recognised emoticon replaced."""
        if self._pattern is None:
            return text

        def _repl(match: re.Match[str]) -> str:
            token = match.group(1)
            return (
                f'<span class="wp-smiley" role="img" '
                f'aria-label="{escape(token, quote=True)}">{self.smilies[token]}</span>'
            )

        return self._pattern.sub(_repl, text)


__all__ = ["DEFAULT_SMILIES", "SmileyConverter"]
