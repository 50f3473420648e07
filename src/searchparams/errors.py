"""searchparams exception hierarchy.

Coercion raises these; the extractors catch them and collapse the
failure to ``None`` plus a log line, so callers of ``get_*`` never see
them under documented inputs.
"""

from dataclasses import dataclass


class SearchParamsError(Exception):
    """Base for all searchparams-specific errors."""


@dataclass(frozen=True, slots=True)
class CoercionError(SearchParamsError):
    """A query-string value could not be converted to the requested type.

    Also raised by ``to_param_string`` for values with no query-string form.
    """

    value: str
    target: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"cannot parse {self.value!r} as {self.target}: {self.reason}"
        return f"cannot parse {self.value!r} as {self.target}"
