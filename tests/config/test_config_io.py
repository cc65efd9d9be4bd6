# topmark:header:start
#
#   project      : JsonShape
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML helpers and value getters."""

from __future__ import annotations

import pytest
import tomlkit

from jsonshape.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    nest_toml_under_section,
    to_toml,
)


def test_defaults_are_fresh_copies() -> None:
    first = load_defaults_dict()
    first["output"]["indent"] = 99

    assert load_defaults_dict()["output"]["indent"] == 2


def test_to_toml_round_trips_through_tomlkit() -> None:
    text = to_toml(load_defaults_dict())

    assert tomlkit.parse(text).unwrap() == load_defaults_dict()


def test_nest_under_section() -> None:
    nested = nest_toml_under_section(to_toml({"output": {"indent": 2}}), "tool.jsonshape")

    assert tomlkit.parse(nested).unwrap() == {"tool": {"jsonshape": {"output": {"indent": 2}}}}


def test_nest_under_empty_section_is_rejected() -> None:
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", ".")


def test_getters_reject_wrong_types() -> None:
    table = {"n": 3, "flag": True, "s": "x", "t": {"k": 1}, "bad_t": 4}

    assert get_int_value_or_none(table, "n") == 3
    assert get_int_value_or_none(table, "flag") is None
    assert get_bool_value_or_none(table, "flag") is True
    assert get_bool_value_or_none(table, "n") is True
    assert get_bool_value_or_none(table, "s") is None
    assert get_string_value_or_none(table, "s") == "x"
    assert get_string_value_or_none(table, "n") is None
    assert get_table_value(table, "t") == {"k": 1}
    assert get_table_value(table, "bad_t") == {}
    assert get_table_value(table, "missing") == {}
