"""
Per-owner caching of rendered page data.

Pages read their rows through `cached_page_rows`; every mutation marks the
page stale with `revalidate_path` so the next render re-reads the database.

Rows are stored under a key that carries the page's current version token.
A mutation replaces the token instead of deleting the rows, so a render that
loaded its rows before the write finished stores them under the old token,
where no later read looks.
"""
import logging
import uuid
from typing import Callable, Dict

from django.conf import settings
from django.core.cache import cache

logger = logging.getLogger(__name__)


def _version_key(path: str, user_id) -> str:
    return f"rolepilot:page-version:{path}:{user_id}"


def page_cache_key(path: str, user_id, version: str) -> str:
    return f"rolepilot:page:{path}:{user_id}:{version}"


def page_version(path: str, user_id) -> str:
    """Current version token of `path` for `user_id`, created on first use."""
    return cache.get_or_set(_version_key(path, user_id), uuid.uuid4().hex, None)


def cached_page_rows(path: str, user_id, loader: Callable[[], Dict]) -> Dict:
    """
    Return the rows for `path` as seen by `user_id`, loading on a miss.

    `loader` must return fully evaluated data (lists, not lazy querysets).
    The version is read before loading; see the module docstring.
    """
    key = page_cache_key(path, user_id, page_version(path, user_id))
    rows = cache.get(key)
    if rows is None:
        rows = loader()
        cache.set(key, rows, settings.ROLEPILOT_PAGE_CACHE_TIMEOUT)
    return rows


def revalidate_path(path: str, user_id) -> None:
    """Mark the cached rendering of `path` for `user_id` as stale."""
    cache.set(_version_key(path, user_id), uuid.uuid4().hex, None)
    logger.debug("Revalidated %s for user %s", path, user_id)
