"""Tests for searchparams.__init__ — the lazy public API registry."""

import importlib

import pytest

import searchparams


@pytest.mark.parametrize(("name", "module_name"), sorted(searchparams._LAZY_IMPORTS.items()))
def test_name_resolves_to_defining_module(name: str, module_name: str) -> None:
    """``searchparams.X`` is the very object defined in the module the registry names."""
    module = importlib.import_module(module_name)
    assert getattr(searchparams, name) is getattr(module, name)


def test_registry_matches_all() -> None:
    assert set(searchparams._LAZY_IMPORTS) == set(searchparams.__all__)
    assert len(searchparams.__all__) == len(set(searchparams.__all__))


def test_star_import_exposes_getters() -> None:
    namespace: dict[str, object] = {}
    exec("from searchparams import *", namespace)  # noqa: S102
    assert callable(namespace["get_int"])
    assert callable(namespace["add_params"])


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="has no attribute 'get_everything'"):
        searchparams.get_everything  # noqa: B018
