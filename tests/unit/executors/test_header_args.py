"""
Header argument helper tests.
"""

import pytest

from babel_basex.executors.header_args import (
    get_param,
    get_vars,
    merge_defaults,
    normalize_params,
    var_declarations,
    xquery_literal,
)


class TestParams:
    def test_colon_and_bare_keys_are_equivalent(self):
        assert get_param({":db": "factbook"}, "db") == "factbook"
        assert get_param({"db": "factbook"}, ":db") == "factbook"

    def test_missing_and_none_use_default(self):
        assert get_param({}, ":preamble", "") == ""
        assert get_param({":preamble": None}, ":preamble", "x") == "x"
        assert get_param(None, ":db") is None

    def test_normalize_strips_colons(self):
        assert normalize_params({":db": "a", "results": "output"}) == {"db": "a", "results": "output"}

    def test_merge_defaults_params_win(self):
        merged = merge_defaults({":db": "default", ":preamble": "p"}, {"db": "mine"})
        assert merged == {"db": "mine", "preamble": "p"}


class TestVars:
    def test_mapping(self):
        assert get_vars({":var": {"x": 1, "$y": "a"}}) == [("x", 1), ("y", "a")]

    def test_single_assignment_string(self):
        assert get_vars({":var": "name=Ada Lovelace"}) == [("name", "Ada Lovelace")]

    def test_list_of_strings_and_pairs(self):
        assert get_vars({":var": ["a=1", ("b", 2)]}) == [("a", "1"), ("b", 2)]

    def test_no_vars(self):
        assert get_vars({":db": "x"}) == []

    def test_rejects_missing_equals(self):
        with pytest.raises(ValueError):
            get_vars({":var": "novalue"})

    def test_rejects_bad_name(self):
        with pytest.raises(ValueError):
            get_vars({":var": {"1bad": 1}})


class TestXQueryLiteral:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "()"),
            (True, "true()"),
            (False, "false()"),
            (42, "42"),
            (1.5, "1.5"),
            ("plain", '"plain"'),
            ('say "hi" & bye', '"say ""hi"" &amp; bye"'),
            ([1, "a"], '(1, "a")'),
            ((), "()"),
            (float("inf"), "xs:double('INF')"),
            (float("-inf"), "xs:double('-INF')"),
            (float("nan"), "xs:double('NaN')"),
        ],
    )
    def test_literals(self, value, expected):
        assert xquery_literal(value) == expected

    def test_declarations(self):
        text = var_declarations({":var": {"n": 3, "s": "x"}})
        assert text == 'declare variable $n := 3;\ndeclare variable $s := "x";\n'

    def test_declarations_empty(self):
        assert var_declarations({}) == ""
