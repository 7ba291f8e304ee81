"""Sample site content the sandbox widgets render from."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class Post:
    """A published blog post."""

    id: int
    title: str
    url: str
    published: dt.datetime
    author: str = ""


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A static page."""

    id: int
    title: str
    url: str
    menu_order: int = 0
    parent: int | None = None


@dc.dataclass(frozen=True, slots=True)
class Category:
    """A post category."""

    id: int
    name: str
    url: str
    count: int = 0
    parent: int | None = None


@dc.dataclass(frozen=True, slots=True)
class Tag:
    """A post tag."""

    name: str
    url: str
    count: int = 0


@dc.dataclass(frozen=True, slots=True)
class Comment:
    """A reader comment left on a post."""

    author: str
    post_id: int
    published: dt.datetime | None = None


@dc.dataclass(frozen=True, slots=True)
class Link:
    """A blogroll link."""

    name: str
    url: str
    description: str = ""
    rating: int = 0
    image: str | None = None


@dc.dataclass(slots=True)
class SiteContent:
    """Everything the sandbox widgets can list."""

    home_url: str = "/"
    posts: list[Post] = dc.field(default_factory=list)
    pages: list[Page] = dc.field(default_factory=list)
    categories: list[Category] = dc.field(default_factory=list)
    tags: list[Tag] = dc.field(default_factory=list)
    comments: list[Comment] = dc.field(default_factory=list)
    links: list[Link] = dc.field(default_factory=list)

    def posts_newest_first(self) -> list[Post]:
        """Return posts ordered from newest to oldest."""
        return sorted(self.posts, key=lambda post: post.published, reverse=True)

    def get_post(self, post_id: int) -> Post | None:
        """Return the post with ``post_id``, if present."""
        return next((post for post in self.posts if post.id == post_id), None)


__all__ = ["Category", "Comment", "Link", "Page", "Post", "SiteContent", "Tag"]
