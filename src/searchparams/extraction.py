"""Typed extraction of query parameters.

Every getter returns ``None`` when the value is absent, and never raises
for bad input:

- **Missing or empty** (``?page=`` or no ``page`` at all): ``None``,
  nothing logged.
- **Coercion failure** (``?page=abc``, ``?flag=TRUE``): logged at ERROR
  with the key name, then ``None``.
- **Unparseable date**: not an error. An ``InvalidDate`` comes back
  and the caller checks ``is_valid_date``.

Array getters read every value for the key. One bad element discards
the whole array (``None``, logged once); empty elements are not skipped.

Usage::

    params = SearchParams("page=2&tag=a&tag=b&active=true")
    get_int(params, "page")              # 2
    get_string_array(params, "tag")      # ["a", "b"]
    get_boolean(params, "active")        # True
"""

import logging
from collections.abc import Callable

from searchparams._internal.multimap import MultiValueMapping
from searchparams._internal.types import DateValue
from searchparams.coercion import (
    parse_boolean,
    parse_date,
    parse_float,
    parse_int,
)
from searchparams.config import DEFAULT_CONFIG, ParamsConfig
from searchparams.errors import CoercionError


def get_string(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> str | None:
    """Return the first value for *key* unchanged, or ``None`` if missing or empty."""
    return _first(params, key)


def get_int(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> int | None:
    """Return the first value for *key* as an int.

    Trailing text is ignored unless ``config.strict_numbers`` is set.
    """
    strict = config.strict_numbers
    return _extract(params, key, lambda raw: parse_int(raw, strict=strict), config, logger)


def get_float(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> float | None:
    """Return the first value for *key* as a float."""
    strict = config.strict_numbers
    return _extract(params, key, lambda raw: parse_float(raw, strict=strict), config, logger)


def get_boolean(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> bool | None:
    """Return ``True``/``False`` for exactly ``"true"``/``"false"``; anything else is ``None``."""
    return _extract(params, key, parse_boolean, config, logger)


def get_date(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> DateValue | None:
    """Return the first value for *key* as a datetime.

    Unparseable text yields ``InvalidDate``, not ``None``.
    """
    raw = _first(params, key)
    if raw is None:
        return None
    return parse_date(raw)


# -- Arrays --


def get_string_array(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> list[str] | None:
    """Return every value for *key*, or ``None`` if the key is missing."""
    values = params.get_list(key)
    if not values:
        return None
    return list(values)


def get_int_array(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> list[int] | None:
    strict = config.strict_numbers
    return _extract_all(params, key, lambda raw: parse_int(raw, strict=strict), config, logger)


def get_float_array(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> list[float] | None:
    strict = config.strict_numbers
    return _extract_all(params, key, lambda raw: parse_float(raw, strict=strict), config, logger)


def get_boolean_array(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> list[bool] | None:
    return _extract_all(params, key, parse_boolean, config, logger)


def get_date_array(
    params: MultiValueMapping,
    key: str,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> list[DateValue] | None:
    """Return every value for *key* as a datetime. Bad elements become ``InvalidDate``."""
    values = params.get_list(key)
    if not values:
        return None
    return [parse_date(raw) for raw in values]


# -- Internals --


def _first(params: MultiValueMapping, key: str) -> str | None:
    """First value for *key*, with ``""`` treated as missing."""
    raw = params.get(key)
    if raw is None or raw == "":
        return None
    return raw


def _extract[T](
    params: MultiValueMapping,
    key: str,
    parse: Callable[[str], T],
    config: ParamsConfig,
    logger: logging.Logger | None,
) -> T | None:
    raw = _first(params, key)
    if raw is None:
        return None
    try:
        return parse(raw)
    except CoercionError as exc:
        report_failure(key, exc, config=config, logger=logger)
        return None


def _extract_all[T](
    params: MultiValueMapping,
    key: str,
    parse: Callable[[str], T],
    config: ParamsConfig,
    logger: logging.Logger | None,
) -> list[T] | None:
    values = params.get_list(key)
    if not values:
        return None
    try:
        return [parse(raw) for raw in values]
    except CoercionError as exc:
        report_failure(key, exc, config=config, logger=logger)
        return None


def report_failure(
    subject: str,
    exc: Exception,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> None:
    """Log a coercion failure for *subject* (a key, or a group like ``"ordering"``)."""
    (logger or config.logger()).error("An error occurred while parsing %s: %s", subject, exc)
