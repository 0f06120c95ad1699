import json

import pytest

from auxengine.json_parser import JsonParser


def test_parse_string_and_get_value():
    parser = JsonParser()
    parser.parse_string('{"name": "Demo", "size": [1, 2], "nested": {"on": true}}')
    assert parser.get_value("name") == "Demo"
    assert parser.get_value("size") == [1, 2]
    assert parser.get_value("nested") == {"on": True}


def test_contains():
    parser = JsonParser()
    parser.parse_string('{"a": null}')
    assert parser.contains("a")
    assert not parser.contains("b")


def test_contains_on_non_object_is_false():
    parser = JsonParser()
    parser.parse_string("[1, 2, 3]")
    assert not parser.contains("a")


def test_fresh_parser_has_no_values():
    parser = JsonParser()
    assert parser.data is None
    assert not parser.contains("a")
    with pytest.raises(KeyError):
        parser.get_value("a")


def test_invalid_text_raises_and_keeps_document():
    parser = JsonParser()
    parser.parse_string('{"a": 1}')
    with pytest.raises(json.JSONDecodeError):
        parser.parse_string("{not json")
    assert parser.get_value("a") == 1


def test_missing_key_raises():
    parser = JsonParser()
    parser.parse_string('{"a": 1}')
    with pytest.raises(KeyError):
        parser.get_value("b")


def test_lookup_in_array_raises_type_error():
    parser = JsonParser()
    parser.parse_string("[1]")
    with pytest.raises(TypeError):
        parser.get_value("a")


def test_parse_file(tmp_path):
    path = tmp_path / "doc.json"
    document = {"title": "level", "count": 3}
    path.write_text(json.dumps(document), encoding="utf-8")
    parser = JsonParser()
    parser.parse_file(path)
    assert parser.data == document
    assert parser.get_value("count") == 3


def test_parse_missing_file_raises(tmp_path):
    parser = JsonParser()
    with pytest.raises(FileNotFoundError):
        parser.parse_file(tmp_path / "absent.json")


def test_parse_invalid_file_raises(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{", encoding="utf-8")
    parser = JsonParser()
    with pytest.raises(json.JSONDecodeError):
        parser.parse_file(path)