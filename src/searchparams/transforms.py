"""Building and reshaping ``SearchParams``.

Every function returns a new ``SearchParams``; the input is never
modified. Typed values are rendered with ``to_param_string``.

Usage::

    params = create_params({"page": 1, "tag": ["a", "b"], "q": None})
    str(params)                                   # "page=1&tag=a&tag=b"
    str(add_params(params, {"tag": ["c"]}))       # "page=1&tag=c"
    str(delete_params(params, ["page"]))          # "tag=a&tag=b"
    params_to_dict(params, array_keys=["tag"])    # {"page": "1", "tag": ["a", "b"]}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from searchparams._internal.types import ParamValue
from searchparams.coercion import to_param_string
from searchparams.params import SearchParams


def copy_params(params: SearchParams) -> SearchParams:
    """Return a new ``SearchParams`` with the same pairs in the same order."""
    copied = SearchParams()
    for key, value in params.multi_items():
        copied.append(key, value)
    return copied


def delete_params(params: SearchParams, keys: Iterable[str]) -> SearchParams:
    """Return a copy without any occurrence of *keys*.

    Example:
        delete_params(SearchParams("page=1&pageSize=10&orderBy=name"), ["page", "pageSize"])
        → "orderBy=name"
    """
    result = copy_params(params)
    for key in keys:
        result.delete(key)
    return result


def filter_params(params: SearchParams, keys: Iterable[str]) -> SearchParams:
    """Return a copy holding only the pairs whose key is in *keys*.

    Order and repeat counts of the surviving pairs are preserved.
    """
    keep = frozenset(keys)
    result = SearchParams()
    for key, value in params.multi_items():
        if key in keep:
            result.append(key, value)
    return result


def params_to_dict(
    params: SearchParams,
    array_keys: Iterable[str] = (),
) -> dict[str, str | list[str]]:
    """Convert to a plain dict for further processing.

    Keys in *array_keys* collect every value into a list; other keys keep
    the last value seen.

    Example:
        params_to_dict(SearchParams("a=1&a=2&b=x&b=y"), ["a"])
        → {"a": ["1", "2"], "b": "y"}
    """
    as_list = frozenset(array_keys)
    result: dict[str, str | list[str]] = {}
    for key, value in params.multi_items():
        if key in as_list:
            existing = result.get(key)
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[key] = [value]
        else:
            result[key] = value
    return result


def create_params(values: Mapping[str, ParamValue]) -> SearchParams:
    """Build ``SearchParams`` from typed values.

    ``None`` values are skipped. Lists and tuples add one pair per element.
    """
    result = SearchParams()
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            for item in value:
                result.append(key, to_param_string(item))
        else:
            result.set(key, to_param_string(value))
    return result


def add_params(params: SearchParams, values: Mapping[str, ParamValue]) -> SearchParams:
    """Return a copy of *params* with *values* merged in.

    A sequence replaces every existing occurrence of its key; an empty
    sequence removes the key. A scalar overwrites the first occurrence and
    drops the rest. ``None`` leaves the key untouched.
    """
    result = copy_params(params)
    for key, value in values.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            if not value or result.has(key):
                result.delete(key)
            for item in value:
                result.append(key, to_param_string(item))
        else:
            result.set(key, to_param_string(value))
    return result
