"""Common literal values used across monster_widget.

Hook names, identifier prefixes and fixed URLs live here so the widget, the
config provider and the tests share one spelling.

Examples
--------
>>> from monster_widget import _constants
>>> _constants.PLACEHOLDER_ID_TEMPLATE.format(number=3)
'monster-widget-placeholder-3'
>>> _constants.RECENT_POSTS_CACHE_TEMPLATE.format(number=3)
'monster-widget-recent-posts-cache-3'
"""

TEXT_DOMAIN = "monster-widget"

MONSTER_WIDGET_ID = "monster"
MONSTER_CSS_CLASS = "monster"

CONFIG_FILTER = "monster-widget-config"
TEXT_FILTER = "monster-widget-get-text"

PLACEHOLDER_ID_TEMPLATE = "monster-widget-placeholder-{number}"
RECENT_POSTS_CACHE_TEMPLATE = "monster-widget-recent-posts-cache-{number}"

RSS_FEED_URL = "http://themeshaper.com/feed"
LARGE_IMAGE_URL = (
    "http://wpthemetestdata.files.wordpress.com/2008/09/test-image-landscape-900.jpg"
)
PIPE_RUN_LENGTH = 210
BREAKER_SMILIES = (";)", ":)", ":-D")
