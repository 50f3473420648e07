"""Tests for searchparams.transforms — copy, delete, filter, merge, build."""

from datetime import date

import pytest

from searchparams.errors import CoercionError
from searchparams.params import SearchParams
from searchparams.transforms import (
    add_params,
    copy_params,
    create_params,
    delete_params,
    filter_params,
    params_to_dict,
)


class TestCopy:
    def test_same_pairs_same_order(self) -> None:
        p = SearchParams("b=1&a=2&b=3")
        assert copy_params(p).multi_items() == p.multi_items()

    def test_distinct_instance(self) -> None:
        p = SearchParams("a=1")
        c = copy_params(p)
        assert c is not p
        c.append("a", "2")
        c.set("z", "9")
        assert p.multi_items() == [("a", "1")]


class TestDelete:
    def test_removes_keys(self) -> None:
        p = SearchParams("page=1&pageSize=10&orderBy=name&orderDirection=asc")
        assert str(delete_params(p, ["page", "pageSize"])) == "orderBy=name&orderDirection=asc"

    def test_removes_every_occurrence(self) -> None:
        p = SearchParams("t=a&q=x&t=b")
        assert delete_params(p, ["t"]).multi_items() == [("q", "x")]

    def test_input_untouched(self) -> None:
        p = SearchParams("a=1&b=2")
        delete_params(p, ["a"])
        assert str(p) == "a=1&b=2"

    def test_unknown_keys_ignored(self) -> None:
        assert str(delete_params(SearchParams("a=1"), ["zzz"])) == "a=1"


class TestFilter:
    def test_keeps_only_named_keys(self) -> None:
        p = SearchParams("page=1&pageSize=10&orderBy=name&orderDirection=asc")
        assert str(filter_params(p, ["page", "pageSize"])) == "page=1&pageSize=10"

    def test_preserves_order_and_repeats(self) -> None:
        p = SearchParams("t=a&x=1&u=z&t=b")
        assert filter_params(p, ["u", "t"]).multi_items() == [("t", "a"), ("u", "z"), ("t", "b")]

    def test_empty_keep_set(self) -> None:
        assert len(filter_params(SearchParams("a=1"), [])) == 0


class TestDeleteFilterCompose:
    def test_difference_then_intersection(self) -> None:
        p = SearchParams("a=1&b=2&a=3&c=4&b=5")
        result = filter_params(delete_params(p, ["a"]), ["a", "b"])
        assert result.multi_items() == [("b", "2"), ("b", "5")]


class TestParamsToDict:
    def test_last_value_wins(self) -> None:
        assert params_to_dict(SearchParams("a=1&b=2&a=3")) == {"a": "3", "b": "2"}

    def test_array_keys_collect(self) -> None:
        p = SearchParams("array=1&array=2&array=3")
        assert params_to_dict(p, ["array"]) == {"array": ["1", "2", "3"]}

    def test_mixed(self) -> None:
        p = SearchParams("a=1&a=2&b=x&b=y")
        assert params_to_dict(p, ["a"]) == {"a": ["1", "2"], "b": "y"}

    def test_array_key_with_single_value(self) -> None:
        assert params_to_dict(SearchParams("a=1"), ["a"]) == {"a": ["1"]}

    def test_round_trip(self) -> None:
        assert params_to_dict(create_params({"a": 1, "b": ["x", "y"]}), ["b"]) == {"a": "1", "b": ["x", "y"]}


class TestCreate:
    def test_scalars(self) -> None:
        p = create_params({"page": 1, "pageSize": 10, "orderBy": "name", "orderDirection": "asc"})
        assert str(p) == "page=1&pageSize=10&orderBy=name&orderDirection=asc"

    def test_none_skipped(self) -> None:
        assert create_params({"a": None, "b": 5}).multi_items() == [("b", "5")]

    def test_sequences_repeat_key(self) -> None:
        p = create_params({"tag": ["a", "b"], "ids": (1, 2)})
        assert p.multi_items() == [("tag", "a"), ("tag", "b"), ("ids", "1"), ("ids", "2")]

    def test_empty_sequence_adds_nothing(self) -> None:
        assert len(create_params({"tag": []})) == 0

    def test_canonical_strings(self) -> None:
        p = create_params({"flag": True, "off": False, "ratio": 0.5, "when": date(2024, 1, 2)})
        assert str(p) == "flag=true&off=false&ratio=0.5&when=2024-01-02"

    def test_unsupported_value_raises(self) -> None:
        with pytest.raises(CoercionError):
            create_params({"a": object()})  # type: ignore[dict-item]


class TestAdd:
    def test_sequence_replaces_existing(self) -> None:
        p = SearchParams("b=1&a=x&b=2")
        result = add_params(p, {"b": [3, 4]})
        assert result.get_list("b") == ["3", "4"]
        assert result.multi_items() == [("a", "x"), ("b", "3"), ("b", "4")]

    def test_empty_sequence_clears_key(self) -> None:
        result = add_params(SearchParams("b=1&b=2&a=x"), {"b": []})
        assert "b" not in result
        assert result.multi_items() == [("a", "x")]

    def test_sequence_for_new_key_appends(self) -> None:
        result = add_params(SearchParams("a=x"), {"t": ["p", "q"]})
        assert result.multi_items() == [("a", "x"), ("t", "p"), ("t", "q")]

    def test_scalar_overwrites_first_and_drops_rest(self) -> None:
        result = add_params(SearchParams("page=1&q=x&page=2"), {"page": 5})
        assert result.multi_items() == [("page", "5"), ("q", "x")]

    def test_scalar_new_key_appends(self) -> None:
        assert str(add_params(SearchParams("a=1"), {"b": True})) == "a=1&b=true"

    def test_none_leaves_key(self) -> None:
        assert str(add_params(SearchParams("a=1"), {"a": None})) == "a=1"

    def test_input_untouched(self) -> None:
        p = SearchParams("b=1&b=2")
        add_params(p, {"b": [3], "c": "x"})
        assert str(p) == "b=1&b=2"
