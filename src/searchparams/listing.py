"""Pagination and ordering extraction for list endpoints.

Built from the scalar getters in ``searchparams.extraction``. Key names
come from ``ParamsConfig`` (``page``/``pageSize``/``orderBy``/
``orderDirection`` by default).

Usage::

    params = SearchParams("page=2&pageSize=25&orderBy=name&orderDirection=asc")
    get_pagination(params)  # Pagination(page=2, page_size=25)
    get_ordering(params)    # Ordering(order_by='name', order_direction='asc')
"""

import logging
from dataclasses import dataclass

from searchparams._internal.multimap import MultiValueMapping
from searchparams.config import DEFAULT_CONFIG, ParamsConfig
from searchparams.errors import CoercionError, SearchParamsError
from searchparams.extraction import get_int, get_string, report_failure


@dataclass(frozen=True, slots=True)
class Pagination:
    """Requested page. Either field is ``None`` when missing or invalid."""

    page: int | None = None
    page_size: int | None = None


@dataclass(frozen=True, slots=True)
class Ordering:
    """Requested sort column and direction.

    ``order_direction`` is one of ``ParamsConfig.order_directions``
    (``"asc"``/``"desc"`` by default) or ``None``.
    """

    order_by: str | None = None
    order_direction: str | None = None


def get_pagination(
    params: MultiValueMapping,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> Pagination:
    """Extract ``page`` and ``pageSize`` as ints, each independently."""
    try:
        return Pagination(
            page=get_int(params, config.page_key, config=config, logger=logger),
            page_size=get_int(params, config.page_size_key, config=config, logger=logger),
        )
    except SearchParamsError as exc:
        report_failure("pagination", exc, config=config, logger=logger)
        return Pagination()


def get_ordering(
    params: MultiValueMapping,
    *,
    config: ParamsConfig = DEFAULT_CONFIG,
    logger: logging.Logger | None = None,
) -> Ordering:
    """Extract ``orderBy`` and ``orderDirection``.

    An ``orderDirection`` outside ``config.order_directions`` resets the
    whole result, ``order_by`` included, to ``Ordering()``.
    """
    try:
        order_by = get_string(params, config.order_by_key)
        direction = get_string(params, config.order_direction_key)
        if direction is not None and direction not in config.order_directions:
            allowed = " or ".join(f'"{d}"' for d in config.order_directions)
            raise CoercionError(direction, config.order_direction_key, f"must be either {allowed}")
        return Ordering(order_by=order_by, order_direction=direction)
    except SearchParamsError as exc:
        report_failure("ordering", exc, config=config, logger=logger)
        return Ordering()
