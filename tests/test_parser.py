"""Tests for response body parsing."""

from __future__ import annotations

import json

from rbxstats.parser import parse_json, parse_strict


# ===================================================================
# Legacy quote scanner
# ===================================================================


class TestParseJson:
    def test_flat_object(self) -> None:
        assert parse_json('{"a":"1","b":"2"}') == {"a": "1", "b": "2"}

    def test_nested_object_is_misparsed(self) -> None:
        """Only alternating quoted tokens are read; "1" is left as a dangling key."""
        assert parse_json('{"a":{"b":"1"}}') == {"a": "b"}

    def test_empty_body(self) -> None:
        assert parse_json("") == {}

    def test_duplicate_key_last_value_wins(self) -> None:
        result = parse_json('{"a":"1","b":"2","a":"3"}')
        assert result == {"a": "3", "b": "2"}
        assert list(result) == ["a", "b"]

    def test_insertion_order_follows_text(self) -> None:
        result = parse_json('{"zeta":"1","alpha":"2","mid":"3"}')
        assert list(result) == ["zeta", "alpha", "mid"]

    def test_unquoted_values_are_skipped(self) -> None:
        # 42 and true are outside quotes, so "count" pairs with "name"
        result = parse_json('{"count":42,"enabled":true,"name":"x"}')
        assert result == {"count": "enabled", "name": "x"}

    def test_empty_value(self) -> None:
        assert parse_json('{"a":"","b":"2"}') == {"a": "", "b": "2"}

    def test_empty_key_keeps_collecting(self) -> None:
        assert parse_json('{"":"k","v":"x"}') == {"k": "v"}

    def test_escaped_quote_ends_value_early(self) -> None:
        result = parse_json(r'{"a":"say \"hi\"","b":"2"}')
        assert result["a"] == "say \\"

    def test_structure_outside_quotes_ignored(self) -> None:
        assert parse_json('  [ { "a" : "1" } , { "b" : "2" } ]  ') == {"a": "1", "b": "2"}

    def test_whitespace_inside_quotes_kept(self) -> None:
        assert parse_json('{"a key":" spaced "}') == {"a key": " spaced "}

    def test_html_error_page_yields_partial_mapping(self) -> None:
        body = '<html><body class="error" id="main">Not Found</body></html>'
        assert parse_json(body) == {"error": "main"}

    def test_key_without_value_is_dropped(self) -> None:
        assert parse_json('{"a":"1","b"') == {"a": "1"}


# ===================================================================
# Strict decoder
# ===================================================================


class TestParseStrict:
    def test_flat_object(self) -> None:
        assert parse_strict('{"a":"1","b":"2"}') == {"a": "1", "b": "2"}

    def test_typed_scalars_become_strings(self) -> None:
        result = parse_strict('{"n":42,"f":1.5,"t":true,"x":false,"z":null}')
        assert result == {"n": "42", "f": "1.5", "t": "true", "x": "false", "z": "null"}

    def test_nested_values_kept_as_json(self) -> None:
        result = parse_strict('{"a":{"b":"1"},"l":[1,2]}')
        assert json.loads(result["a"]) == {"b": "1"}
        assert result["l"] == "[1,2]"

    def test_escapes_decoded(self) -> None:
        assert parse_strict(r'{"a":"say \"hi\""}') == {"a": 'say "hi"'}

    def test_empty_body(self) -> None:
        assert parse_strict("") == {}
        assert parse_strict("   ") == {}

    def test_invalid_json_is_empty(self, caplog) -> None:
        assert parse_strict("<html>502</html>") == {}
        assert "not valid JSON" in caplog.text

    def test_non_object_is_empty(self) -> None:
        assert parse_strict('["a","b"]') == {}
        assert parse_strict('"a"') == {}

    def test_duplicate_key_last_value_wins(self) -> None:
        assert parse_strict('{"a":"1","a":"2"}') == {"a": "2"}


def test_strict_nested_values_keep_unicode() -> None:
    result = parse_strict('{"a":{"name":"Délta"},"l":["✓"]}')
    assert result == {"a": '{"name":"Délta"}', "l": '["✓"]'}
