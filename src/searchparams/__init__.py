"""searchparams — typed values in and out of URL query strings.

Reads typed scalars and arrays from a query string without raising on
bad input, and builds, merges, filters and deletes query parameters from
typed Python values.

Basic usage::

    from searchparams import SearchParams, get_int, get_pagination, add_params

    params = SearchParams("page=2&pageSize=25&tag=a&tag=b")
    get_int(params, "page")          # 2
    get_pagination(params)           # Pagination(page=2, page_size=25)
    str(add_params(params, {"page": 3, "tag": []}))
    # "page=3&pageSize=25"

Template filters (``pip install searchparams[templating]``)::

    from searchparams.templating.filters import register_filters
    register_filters(env)  # kida Environment
"""

__version__ = "0.1.0"
__all__ = [
    "CoercionError",
    "DEFAULT_CONFIG",
    "InvalidDate",
    "MultiValueMapping",
    "Ordering",
    "Pagination",
    "ParamValue",
    "ParamsConfig",
    "SearchParams",
    "SearchParamsError",
    "add_params",
    "copy_params",
    "create_params",
    "delete_params",
    "filter_params",
    "get_boolean",
    "get_boolean_array",
    "get_date",
    "get_date_array",
    "get_float",
    "get_float_array",
    "get_int",
    "get_int_array",
    "get_ordering",
    "get_pagination",
    "get_string",
    "get_string_array",
    "is_valid_date",
    "params_to_dict",
    "to_param_string",
]

# Public name -> defining module. Resolved on first attribute access.
_LAZY_IMPORTS: dict[str, str] = {
    "CoercionError": "searchparams.errors",
    "SearchParamsError": "searchparams.errors",
    "DEFAULT_CONFIG": "searchparams.config",
    "ParamsConfig": "searchparams.config",
    "MultiValueMapping": "searchparams._internal.multimap",
    "ParamValue": "searchparams._internal.types",
    "SearchParams": "searchparams.params",
    "InvalidDate": "searchparams.coercion",
    "is_valid_date": "searchparams.coercion",
    "to_param_string": "searchparams.coercion",
    "get_boolean": "searchparams.extraction",
    "get_boolean_array": "searchparams.extraction",
    "get_date": "searchparams.extraction",
    "get_date_array": "searchparams.extraction",
    "get_float": "searchparams.extraction",
    "get_float_array": "searchparams.extraction",
    "get_int": "searchparams.extraction",
    "get_int_array": "searchparams.extraction",
    "get_string": "searchparams.extraction",
    "get_string_array": "searchparams.extraction",
    "Ordering": "searchparams.listing",
    "Pagination": "searchparams.listing",
    "get_ordering": "searchparams.listing",
    "get_pagination": "searchparams.listing",
    "add_params": "searchparams.transforms",
    "copy_params": "searchparams.transforms",
    "create_params": "searchparams.transforms",
    "delete_params": "searchparams.transforms",
    "filter_params": "searchparams.transforms",
    "params_to_dict": "searchparams.transforms",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import searchparams`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
