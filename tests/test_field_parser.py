import json
import logging
from types import MappingProxyType, SimpleNamespace

import pytest

from sizeguide.models.field_set import RichTextMarkup
from sizeguide.utils.field_parser import looks_like_document, parse_field_value, parse_fields


def rich(*children):
    return json.dumps({"type": "root", "children": list(children)})


class TestParseFieldValue:
    def test_plain_string_kept(self):
        assert parse_field_value("title", "Men's Tops") == "Men's Tops"

    def test_rich_text_document_rendered(self):
        value = rich({"type": "paragraph", "children": [{"type": "text", "value": "42in", "bold": True}]})
        result = parse_field_value("body", value)
        assert isinstance(result, RichTextMarkup)
        assert result == "<p><strong>42in</strong></p>"

    def test_leading_whitespace_still_detected(self):
        assert looks_like_document('  {"a": 1}')
        assert parse_field_value("meta", '  {"a": 1}') == {"a": 1}

    def test_other_json_object_stored_as_decoded(self):
        assert parse_field_value("meta", '{"type": "root", "children": "nope"}') == {
            "type": "root",
            "children": "nope",
        }

    def test_invalid_json_keeps_raw_string(self, caplog):
        caplog.set_level(logging.DEBUG, logger="sizeguide.utils.field_parser")
        assert parse_field_value("body", "{not json") == "{not json"
        assert "could not be decoded" in caplog.text

    def test_non_string_value_untouched(self):
        assert parse_field_value("count", None) is None

    def test_array_json_not_treated_as_document(self):
        assert parse_field_value("sizes", "[1, 2]") == "[1, 2]"


class TestParseFields:
    def test_mixed_fields(self):
        fields = [
            {"key": "title", "value": "Tops"},
            {"key": "body", "value": rich({"type": "heading", "level": 9, "children": [{"type": "text", "value": "Fit"}]})},
            {"key": "broken", "value": "{oops"},
        ]
        parsed = parse_fields(fields)
        assert parsed["title"] == "Tops"
        assert parsed["body"] == "<h2>Fit</h2>"
        assert parsed["broken"] == "{oops"

    def test_accepts_objects_with_key_value(self):
        parsed = parse_fields([SimpleNamespace(key="title", value="Tops")])
        assert dict(parsed) == {"title": "Tops"}

    def test_accepts_read_only_mappings(self):
        parsed = parse_fields([MappingProxyType({"key": "title", "value": "Tops"})])
        assert dict(parsed) == {"title": "Tops"}

    def test_later_duplicate_key_wins(self):
        parsed = parse_fields([{"key": "title", "value": "A"}, {"key": "title", "value": "B"}])
        assert parsed["title"] == "B"

    def test_non_string_keys_skipped(self):
        assert dict(parse_fields([{"key": None, "value": "x"}])) == {}

    def test_result_is_read_only(self):
        parsed = parse_fields([{"key": "title", "value": "A"}])
        with pytest.raises(TypeError):
            parsed["title"] = "B"

    def test_none_fields(self):
        assert dict(parse_fields(None)) == {}
