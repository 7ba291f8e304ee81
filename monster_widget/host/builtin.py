"""Stock widget types rendered by the sandbox host.

Each widget here mirrors one of the classic blog sidebar widgets (archives,
calendar, categories, pages, meta, recent comments, recent posts, RSS,
search, text, tag cloud, navigation menu and the optional links widget).
They read from a :class:`~monster_widget.host.content.SiteContent` snapshot
and render through the Jinja templates under ``templates/widgets``.

Typical wiring registers every stock type on a host:

>>> from monster_widget.host import Host, SiteContent
>>> host = Host()
>>> widgets = register_core_widgets(host, SiteContent())
>>> "archives" in host.widgets
True
"""

from __future__ import annotations

import calendar
import collections
import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown
from markupsafe import Markup

from .feeds import FeedError, FeedReader
from .models import WidgetType

if typ.TYPE_CHECKING:
    from .content import Category, Page, SiteContent
    from .models import DisplayArgs, WidgetSettings
    from .runtime import Host

logger = logging.getLogger(__name__)

TAG_CLOUD_SMALLEST = 8
TAG_CLOUD_LARGEST = 22
RECENT_POSTS_CACHE_SIZE = 32

ARCHIVES = "archives"
CALENDAR = "calendar"
CATEGORIES = "categories"
PAGES = "pages"
META = "meta"
RECENT_COMMENTS = "recent-comments"
RECENT_POSTS = "recent-posts"
RSS = "rss"
SEARCH = "search"
TEXT = "text"
TAG_CLOUD = "tag_cloud"
NAV_MENU = "nav_menu"
LINKS = "links"

_DOMAIN = "default"


def _flag(settings: WidgetSettings, key: str) -> bool:
    return bool(settings.get(key))


def _int(settings: WidgetSettings, key: str, default: int) -> int:
    try:
        return int(settings.get(key, default))
    except (TypeError, ValueError):
        return default


class CoreWidgets:
    """Render the stock widget types from a site content snapshot."""

    def __init__(
        self,
        host: Host,
        content: SiteContent,
        *,
        feeds: FeedReader | None = None,
        templates_dir: Path | None = None,
        today: dt.date | None = None,
    ) -> None:
        """Initialize the renderers and their Jinja environment.

        Parameters
        ----------
        host : Host
            Host used for translations and navigation menu lookups.
        content : SiteContent
            Posts, pages, taxonomies, comments and links to list.
        feeds : FeedReader, optional
            Reader used by the RSS widget; defaults to a live reader.
        templates_dir : Path, optional
            Directory containing the ``widgets/*.jinja`` templates. Defaults to
            ``monster_widget/templates``.
        today : date, optional
            Date the calendar falls back to when there are no posts.
        """
        self.host = host
        self.content = content
        self.feeds = feeds or FeedReader()
        self.today = today
        self.templates_dir = (
            templates_dir or Path(__file__).resolve().parent.parent / "templates"
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._recent_posts_cache: collections.OrderedDict[str, str] = (
            collections.OrderedDict()
        )

    def widget_types(self, *, include_links: bool = False) -> list[WidgetType]:
        """Return descriptors for every stock widget type."""
        _ = self._
        types = [
            WidgetType(
                id=ARCHIVES,
                name=_("Archives"),
                render=self.archives,
                css_class="widget_archive",
                description=_("A monthly archive of your site's Posts."),
            ),
            WidgetType(
                id=CALENDAR,
                name=_("Calendar"),
                render=self.calendar,
                css_class="widget_calendar",
                description=_("A calendar of your site's Posts."),
            ),
            WidgetType(
                id=CATEGORIES,
                name=_("Categories"),
                render=self.categories,
                css_class="widget_categories",
                description=_("A list or dropdown of categories."),
            ),
            WidgetType(
                id=PAGES,
                name=_("Pages"),
                render=self.pages,
                css_class="widget_pages",
                description=_("A list of your site's Pages."),
            ),
            WidgetType(
                id=META,
                name=_("Meta"),
                render=self.meta,
                css_class="widget_meta",
                description=_("Login, RSS, & WordPress.org links."),
            ),
            WidgetType(
                id=RECENT_COMMENTS,
                name=_("Recent Comments"),
                render=self.recent_comments,
                css_class="widget_recent_comments",
                description=_("Your site's most recent comments."),
            ),
            WidgetType(
                id=RECENT_POSTS,
                name=_("Recent Posts"),
                render=self.recent_posts,
                css_class="widget_recent_entries",
                description=_("Your site's most recent Posts."),
            ),
            WidgetType(
                id=RSS,
                name=_("RSS"),
                render=self.rss,
                css_class="widget_rss",
                description=_("Entries from any RSS or Atom feed."),
            ),
            WidgetType(
                id=SEARCH,
                name=_("Search"),
                render=self.search,
                css_class="widget_search",
                description=_("A search form for your site."),
            ),
            WidgetType(
                id=TEXT,
                name=_("Text"),
                render=self.text,
                css_class="widget_text",
                description=_("Arbitrary text."),
            ),
            WidgetType(
                id=TAG_CLOUD,
                name=_("Tag Cloud"),
                render=self.tag_cloud,
                css_class="widget_tag_cloud",
                description=_("A cloud of your most used tags."),
            ),
            WidgetType(
                id=NAV_MENU,
                name=_("Navigation Menu"),
                render=self.nav_menu,
                css_class="widget_nav_menu",
                description=_("Add a navigation menu to your sidebar."),
            ),
        ]
        if include_links:
            types.append(
                WidgetType(
                    id=LINKS,
                    name=_("Links"),
                    render=self.links,
                    css_class="widget_links",
                    description=_("Your blogroll."),
                )
            )
        return types

    def _(self, text: str) -> str:
        return self.host.translate(text, _DOMAIN)

    def _render(
        self, name: str, settings: WidgetSettings, args: DisplayArgs, **context: typ.Any
    ) -> str:
        template = self.env.get_template(f"widgets/{name}.jinja")
        html = template.render(
            args=args,
            title=settings.get("title") or "",
            settings=settings,
            _=self._,
            **context,
        )
        if not html.endswith("\n"):
            html += "\n"
        return html

    def archives(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render monthly archive links as a list or a dropdown."""
        months: collections.Counter[tuple[int, int]] = collections.Counter(
            (post.published.year, post.published.month) for post in self.content.posts
        )
        entries = [
            {
                "label": f"{calendar.month_name[month]} {year}",
                "url": f"{self.content.home_url.rstrip('/')}/{year:04d}/{month:02d}/",
                "count": count,
            }
            for (year, month), count in sorted(months.items(), reverse=True)
        ]
        return self._render(
            "archives",
            settings,
            args,
            entries=entries,
            show_count=_flag(settings, "count"),
            dropdown=_flag(settings, "dropdown"),
        )

    def calendar(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render a month grid for the newest post's month."""
        posts = self.content.posts_newest_first()
        if posts:
            anchor = posts[0].published.date()
        else:
            anchor = self.today or dt.datetime.now(dt.UTC).date()
        post_days = {
            post.published.day
            for post in posts
            if (post.published.year, post.published.month) == (anchor.year, anchor.month)
        }
        month_grid = calendar.Calendar(firstweekday=calendar.MONDAY)
        weeks = month_grid.monthdayscalendar(anchor.year, anchor.month)
        base = self.content.home_url.rstrip("/")
        return self._render(
            "calendar",
            settings,
            args,
            caption=f"{calendar.month_name[anchor.month]} {anchor.year}",
            weekdays=[calendar.day_abbr[(day + calendar.MONDAY) % 7] for day in range(7)],
            weeks=weeks,
            post_days=post_days,
            day_url=lambda day: f"{base}/{anchor.year:04d}/{anchor.month:02d}/{day:02d}/",
        )

    def categories(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render categories as a (possibly nested) list or a dropdown."""
        hierarchical = _flag(settings, "hierarchical")
        entries = _category_tree(self.content.categories, hierarchical=hierarchical)
        return self._render(
            "categories",
            settings,
            args,
            entries=entries,
            show_count=_flag(settings, "count"),
            dropdown=_flag(settings, "dropdown"),
        )

    def pages(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render pages sorted by ``sortby`` minus the ``exclude`` ids."""
        excluded = {
            int(segment)
            for segment in str(settings.get("exclude") or "").split(",")
            if segment.strip().isdigit()
        }
        sort_key = _page_sort_key(str(settings.get("sortby") or "menu_order"))
        pages = sorted(
            (page for page in self.content.pages if page.id not in excluded),
            key=sort_key,
        )
        return self._render("pages", settings, args, pages=pages)

    def meta(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render the login and feed links."""
        base = self.content.home_url.rstrip("/")
        return self._render("meta", settings, args, base=base)

    def recent_comments(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render the newest ``number`` comments."""
        number = max(_int(settings, "number", 5), 1)
        oldest = dt.datetime.min.replace(tzinfo=dt.UTC)
        comments = sorted(
            self.content.comments,
            key=lambda comment: comment.published or oldest,
            reverse=True,
        )[:number]
        entries = [
            {"author": comment.author, "post": self.content.get_post(comment.post_id)}
            for comment in comments
        ]
        return self._render("recent_comments", settings, args, entries=entries)

    def recent_posts(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render the newest ``number`` posts.

        Output is cached per widget id. Only the most recently used
        ``RECENT_POSTS_CACHE_SIZE`` ids are kept, since every Monster render
        asks for a fresh one.
        """
        cache_key = args.widget_id or RECENT_POSTS
        cached = self._recent_posts_cache.get(cache_key)
        if cached is not None:
            self._recent_posts_cache.move_to_end(cache_key)
            return cached
        number = max(_int(settings, "number", 5), 1)
        posts = self.content.posts_newest_first()[:number]
        html = self._render("recent_posts", settings, args, posts=posts)
        self._recent_posts_cache[cache_key] = html
        if len(self._recent_posts_cache) > RECENT_POSTS_CACHE_SIZE:
            self._recent_posts_cache.popitem(last=False)
        return html

    def flush_recent_posts_cache(self) -> None:
        """Forget every cached recent posts rendering."""
        self._recent_posts_cache.clear()

    def rss(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render feed entries, or an error notice when the feed is unavailable."""
        url = str(settings.get("url") or "").strip()
        if not url:
            return ""
        limit = min(max(_int(settings, "items", 10), 1), 20)
        error: str | None = None
        items = []
        try:
            items = self.feeds.fetch(url, limit=limit)
        except FeedError as exc:
            logger.warning("RSS widget could not read %s: %s", url, exc)
            error = str(exc)
        return self._render(
            "rss",
            settings,
            args,
            url=url,
            items=items,
            error=error,
            show_author=_flag(settings, "show_author"),
            show_date=_flag(settings, "show_date"),
            show_summary=_flag(settings, "show_summary"),
        )

    def search(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render the search form."""
        return self._render("search", settings, args, action=self.content.home_url)

    def text(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render arbitrary HTML, optionally turning line breaks into paragraphs."""
        body = str(settings.get("text") or "")
        if _flag(settings, "filter"):
            body = markdown(body, extensions=["nl2br"])
        return self._render("text", settings, args, body=Markup(body))

    def tag_cloud(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render tags sized by how often they are used."""
        tags = sorted(self.content.tags, key=lambda tag: tag.name.lower())
        counts = [tag.count for tag in tags]
        low, high = (min(counts), max(counts)) if counts else (0, 0)
        spread = max(high - low, 1)
        step = (TAG_CLOUD_LARGEST - TAG_CLOUD_SMALLEST) / spread
        entries = [
            {
                "tag": tag,
                "size": round(TAG_CLOUD_SMALLEST + (tag.count - low) * step, 3),
            }
            for tag in tags
        ]
        return self._render("tag_cloud", settings, args, entries=entries)

    def nav_menu(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render the navigation menu named by the ``nav_menu`` setting."""
        try:
            menu_id = int(settings.get("nav_menu"))
        except (TypeError, ValueError):
            return ""
        menu = self.host.get_nav_menu(menu_id)
        if menu is None:
            return ""
        return self._render("nav_menu", settings, args, menu=menu)

    def links(self, settings: WidgetSettings, args: DisplayArgs) -> str:
        """Render the blogroll with the requested detail toggles."""
        return self._render(
            "links",
            settings,
            args,
            links=self.content.links,
            show_description=_flag(settings, "description"),
            show_name=_flag(settings, "name"),
            show_rating=_flag(settings, "rating"),
            show_images=_flag(settings, "images"),
        )


def register_core_widgets(
    host: Host,
    content: SiteContent,
    *,
    include_links: bool = False,
    feeds: FeedReader | None = None,
) -> CoreWidgets:
    """Register every stock widget type on ``host`` and return the renderers."""
    widgets = CoreWidgets(host, content, feeds=feeds)
    for widget_type in widgets.widget_types(include_links=include_links):
        host.widgets.register(widget_type)
    return widgets


def _category_tree(
    categories: list[Category], *, hierarchical: bool
) -> list[dict[str, typ.Any]]:
    """Flatten categories into display rows carrying a nesting depth."""
    ordered = sorted(categories, key=lambda category: category.name.lower())
    if not hierarchical:
        return [{"category": category, "depth": 0} for category in ordered]
    known = {category.id for category in ordered}
    children: dict[int | None, list[Category]] = collections.defaultdict(list)
    for category in ordered:
        parent = category.parent if category.parent in known else None
        children[parent].append(category)

    rows: list[dict[str, typ.Any]] = []

    def _walk(parent: int | None, depth: int) -> None:
        for category in children.get(parent, []):
            rows.append({"category": category, "depth": depth})
            _walk(category.id, depth + 1)

    _walk(None, 0)
    return rows


def _page_sort_key(sortby: str) -> typ.Callable[[Page], tuple[typ.Any, ...]]:
    match sortby:
        case "post_title":
            return lambda page: (page.title.lower(), page.id)
        case "ID":
            return lambda page: (page.id,)
        case _:
            return lambda page: (page.menu_order, page.title.lower())


__all__ = [
    "ARCHIVES",
    "CALENDAR",
    "CATEGORIES",
    "LINKS",
    "META",
    "NAV_MENU",
    "PAGES",
    "RECENT_COMMENTS",
    "RECENT_POSTS",
    "RECENT_POSTS_CACHE_SIZE",
    "RSS",
    "SEARCH",
    "TAG_CLOUD",
    "TEXT",
    "CoreWidgets",
    "register_core_widgets",
]
