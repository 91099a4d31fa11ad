"""
Tests for parsing raw deltas into the typed change-list model.
"""

import json

import pytest

from delta2pdf.delta_model import (
    Bold,
    ChangeKind,
    Header,
    ImageContent,
    Italic,
    ListAttr,
    ListKind,
    TextContent,
    parse_delta,
)
from delta2pdf.exceptions import ParseError


class TestParseShapes:

    def test_json_string(self):
        delta = parse_delta('{"ops": [{"insert": "Hello"}]}')
        assert len(delta.ops) == 1
        assert delta.ops[0].change.kind is ChangeKind.INSERT
        assert delta.ops[0].change.content == TextContent("Hello")
        assert delta.ops[0].attributes == ()

    def test_bytes(self):
        delta = parse_delta(json.dumps({"ops": [{"insert": "x"}]}).encode("utf-8"))
        assert delta.ops[0].change.content == TextContent("x")

    def test_bare_list(self):
        delta = parse_delta([{"insert": "a"}, {"insert": "b"}])
        assert [op.change.content.text for op in delta.ops] == ["a", "b"]

    def test_empty_ops(self):
        assert parse_delta({"ops": []}).ops == ()

    def test_image_object(self):
        delta = parse_delta({"ops": [{"insert": {"image": "https://example.com/pic.png"}}]})
        assert delta.ops[0].change.content == ImageContent("https://example.com/pic.png")

    def test_delete_and_retain_are_parsed(self):
        delta = parse_delta({"ops": [
            {"retain": "abc"},
            {"insert": "x"},
            {"delete": {"image": "https://example.com/old.png"}},
        ]})
        kinds = [op.change.kind for op in delta.ops]
        assert kinds == [ChangeKind.RETAIN, ChangeKind.INSERT, ChangeKind.DELETE]
        assert [op.change.content for op in delta.inserts()] == [TextContent("x")]

    def test_null_attributes(self):
        delta = parse_delta({"ops": [{"insert": "x", "attributes": None}]})
        assert delta.ops[0].attributes == ()


class TestAttributes:

    def test_all_supported_attributes(self):
        delta = parse_delta({"ops": [{"insert": "\n", "attributes": {
            "bold": True, "italic": False, "header": 2, "list": "bullet",
        }}]})
        assert delta.ops[0].attributes == (
            Bold(True), Italic(False), Header(2), ListAttr(ListKind.BULLET),
        )

    def test_source_order_is_kept(self):
        delta = parse_delta('{"ops": [{"insert": "\\n", "attributes": {"list": "ordered", "header": 1}}]}')
        assert delta.ops[0].attributes == (ListAttr(ListKind.ORDERED), Header(1))

    def test_unknown_header_level_still_parses(self):
        delta = parse_delta({"ops": [{"insert": "\n", "attributes": {"header": 5}}]})
        assert delta.ops[0].attributes == (Header(5),)


class TestParseErrors:

    @pytest.mark.parametrize("raw", [
        "{not json",
        '{"nope": []}',
        '{"ops": {"insert": "x"}}',
        "42",
    ])
    def test_malformed_document(self, raw):
        with pytest.raises(ParseError):
            parse_delta(raw)

    def test_operation_not_an_object(self):
        with pytest.raises(ParseError, match="Operation 1"):
            parse_delta({"ops": [{"insert": "a"}, "b"]})

    def test_operation_without_change(self):
        with pytest.raises(ParseError, match="exactly one"):
            parse_delta({"ops": [{"attributes": {"bold": True}}]})

    def test_operation_with_two_changes(self):
        with pytest.raises(ParseError, match="exactly one"):
            parse_delta({"ops": [{"insert": "a", "delete": "b"}]})

    @pytest.mark.parametrize("content", [5, None, ["a"], {"video": "https://example.com/v.mp4"}])
    def test_content_matches_no_shape(self, content):
        with pytest.raises(ParseError):
            parse_delta({"ops": [{"insert": content}]})

    def test_invalid_content_in_delete_is_rejected(self):
        with pytest.raises(ParseError):
            parse_delta({"ops": [{"insert": "a"}, {"delete": 3}]})

    @pytest.mark.parametrize("url", ["pic.png", "/images/pic.png", 7])
    def test_image_url_must_be_absolute(self, url):
        with pytest.raises(ParseError):
            parse_delta({"ops": [{"insert": {"image": url}}]})

    @pytest.mark.parametrize("attributes", [
        {"bold": "yes"},
        {"italic": 1},
        {"header": "1"},
        {"header": True},
        {"header": 1.5},
        {"header": 300},
        {"list": "checked"},
        {"list": ["ordered"]},
        {"color": "#ff0000"},
        ["bold"],
    ])
    def test_bad_attributes(self, attributes):
        with pytest.raises(ParseError):
            parse_delta({"ops": [{"insert": "x", "attributes": attributes}]})

    def test_error_is_raised_before_anything_is_returned(self):
        # A bad op at the end fails the whole document
        ops = [{"insert": "fine"}] * 10 + [{"insert": 1}]
        with pytest.raises(ParseError, match="Operation 10"):
            parse_delta({"ops": ops})
