"""Template filters for rewriting the query string of a URL.

Thin wrappers over ``searchparams.transforms`` that take and return a
``path?query`` string, for pagination links and filter toggles in
server-rendered templates. ``register_filters`` installs them on a kida
``Environment`` (``pip install searchparams[templating]``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from searchparams.params import SearchParams
from searchparams.transforms import add_params, delete_params, filter_params

if TYPE_CHECKING:
    from kida import Environment


def with_params(url: str, **values: Any) -> str:
    """Merge typed values into the URL's query string.

    Same rules as ``add_params``: ``None`` is ignored, a list replaces
    every existing value, an empty list removes the key.

    Example:
        {{ request_url | with_params(page=page + 1) }}
        → "/items?q=pika&page=3"   (from "/items?q=pika&page=2")

    """
    path, params = _split(url)
    return _join(path, add_params(params, values))


def without_params(url: str, *keys: str) -> str:
    """Drop every occurrence of *keys* from the URL's query string.

    Example:
        {{ "/items?q=pika&page=3" | without_params("page") }}
        → "/items?q=pika"

    """
    path, params = _split(url)
    return _join(path, delete_params(params, keys))


def only_params(url: str, *keys: str) -> str:
    """Keep only *keys* in the URL's query string."""
    path, params = _split(url)
    return _join(path, filter_params(params, keys))


def _split(url: str) -> tuple[str, SearchParams]:
    path, _, query = url.partition("?")
    return path, SearchParams(query)


def _join(path: str, params: SearchParams) -> str:
    query = str(params)
    if not query:
        return path
    return f"{path}?{query}"


# All searchparams filters, keyed by template name.
BUILTIN_FILTERS: dict[str, Any] = {
    "only_params": only_params,
    "with_params": with_params,
    "without_params": without_params,
}


def register_filters(env: Environment) -> Environment:
    """Register ``BUILTIN_FILTERS`` on a kida environment and return it."""
    env.update_filters(BUILTIN_FILTERS)
    return env
