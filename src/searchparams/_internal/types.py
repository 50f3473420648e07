"""Shared type aliases used across searchparams modules."""

from collections.abc import Sequence
from datetime import date
from typing import TypeAlias

from searchparams.coercion import InvalidDate

# A date extracted from a query string: parsed, or the raw text that failed
DateValue: TypeAlias = date | InvalidDate

# A single typed value that serializes to one query-string entry
Scalar: TypeAlias = str | int | float | bool | date | InvalidDate

# Input to create_params / add_params. None is skipped, sequences repeat the key
ParamValue: TypeAlias = Scalar | Sequence[Scalar] | None
