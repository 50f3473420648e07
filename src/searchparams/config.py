"""Extraction configuration.

ParamsConfig is a frozen dataclass, immutable after creation. Query key names
and the number-parsing mode live here instead of in string-key dicts.
"""

import logging
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParamsConfig:
    """Extraction configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ParamsConfig(page_size_key="per_page", strict_numbers=True)
    """

    # Pagination keys
    page_key: str = "page"
    page_size_key: str = "pageSize"

    # Ordering keys
    order_by_key: str = "orderBy"
    order_direction_key: str = "orderDirection"
    order_directions: tuple[str, ...] = ("asc", "desc")

    # Numbers: False accepts a numeric prefix ("12abc" -> 12), True needs the whole value
    strict_numbers: bool = False

    # Logging
    logger_name: str = "searchparams"

    def logger(self) -> logging.Logger:
        """Return the logger coercion failures are reported to."""
        return logging.getLogger(self.logger_name)


DEFAULT_CONFIG = ParamsConfig()
