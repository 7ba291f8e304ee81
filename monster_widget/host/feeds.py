"""Fetch and parse RSS 2.0 feeds for the RSS widget.

The reader performs a single HTTP GET through a :class:`requests.Session`
and parses the channel items with :mod:`xml.etree.ElementTree`. Every
failure, network, HTTP status or malformed XML, surfaces as
:class:`FeedError` so the widget can render an error notice instead of
aborting the sidebar.

Examples
--------
>>> reader = FeedReader(enabled=False)
>>> reader.fetch("https://example.invalid/feed")  # doctest: +SKIP
Traceback (most recent call last):
FeedError: feed fetching is disabled
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import email.utils
import xml.etree.ElementTree as ET  # noqa: N817, S405 - feeds are display-only

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

DEFAULT_TIMEOUT = 10.0
_DC_CREATOR = "{http://purl.org/dc/elements/1.1/}creator"


class FeedError(RuntimeError):
    """Raised when a feed cannot be fetched or parsed."""


@dc.dataclass(frozen=True, slots=True)
class FeedItem:
    """A single entry parsed from a feed channel."""

    title: str
    link: str
    author: str | None = None
    published: dt.datetime | None = None
    summary: str = ""


class FeedReader:
    """Retrieve feed items over HTTP."""

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        enabled: bool = True,
    ) -> None:
        """Initialize the reader.

        Parameters
        ----------
        session : requests.Session, optional
            Session used for HTTP calls; a new one is created when omitted.
        timeout : float, optional
            Seconds to wait for the feed server.
        enabled : bool, optional
            When ``False`` every fetch fails immediately without network I/O.
        """
        self.session = session or _retrying_session()
        self.timeout = timeout
        self.enabled = enabled

    def fetch(self, url: str, limit: int | None = None) -> list[FeedItem]:
        """Return up to ``limit`` items from the feed at ``url``.

        Raises
        ------
        FeedError
            If fetching is disabled, the request fails, the server answers
            with an error status, or the document is not a readable RSS feed.
        """
        if not self.enabled:
            msg = "feed fetching is disabled"
            raise FeedError(msg)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            msg = f"could not fetch {url}: {exc}"
            raise FeedError(msg) from exc
        if response.status_code != 200:
            msg = f"{url} answered HTTP {response.status_code}"
            raise FeedError(msg)
        items = parse_feed(response.content)
        if limit is not None:
            items = items[: max(limit, 0)]
        return items


def _retrying_session() -> requests.Session:
    session = requests.Session()
    retry = Retry(
        total=3,
        connect=2,
        backoff_factor=0.5,
        status_forcelist=(500, 502, 503, 504),
        allowed_methods=("GET", "HEAD"),
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


def parse_feed(payload: bytes | str) -> list[FeedItem]:
    """Parse an RSS 2.0 document into feed items."""
    try:
        root = ET.fromstring(payload)  # noqa: S314
    except ET.ParseError as exc:
        msg = f"invalid feed document: {exc}"
        raise FeedError(msg) from exc
    channel = root.find("channel")
    if channel is None:
        msg = "feed document has no channel"
        raise FeedError(msg)
    return [_parse_item(node) for node in channel.findall("item")]


def _parse_item(node: ET.Element) -> FeedItem:
    author = _text(node, _DC_CREATOR) or _text(node, "author") or None
    return FeedItem(
        title=_text(node, "title"),
        link=_text(node, "link"),
        author=author,
        published=_parse_date(_text(node, "pubDate")),
        summary=_text(node, "description"),
    )


def _text(node: ET.Element, tag: str) -> str:
    found = node.find(tag)
    if found is None or found.text is None:
        return ""
    return found.text.strip()


def _parse_date(value: str) -> dt.datetime | None:
    if not value:
        return None
    try:
        parsed = email.utils.parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = ["DEFAULT_TIMEOUT", "FeedError", "FeedItem", "FeedReader", "parse_feed"]
