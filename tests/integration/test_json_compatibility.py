"""
Test cases for compatibility with the standard json module.

Valid JSON must come back as the standard library would parse and compactly
serialize it.
"""

import io
import json
import os
import tempfile
import unittest

import jsonmend

VALID_DOCUMENTS = [
    '{"test": "value"}',
    "[1, 2, 3]",
    '{"nested": {"array": [1, 2, {"deep": true}]}}',
    '{"number": 123, "float": 45.67, "bool": false, "null": null}',
    '{"escapes": "line\\nbreak \\"quoted\\" \\u00e9 \\\\"}',
    '{"big": 123456789012345678901234567890, "exp": 1.5e-10, "neg": -0.25}',
    '  {"padded": [ ]}\n',
    '"just a string"',
    "true",
    "null",
    "[]",
    "{}",
]


def canonical(text: str) -> str:
    return json.dumps(json.loads(text), ensure_ascii=False, separators=(",", ":"))


class TestLoadsCompatibility(unittest.TestCase):
    """Test loads() against json.loads()."""

    def test_valid_documents(self):
        for text in VALID_DOCUMENTS:
            with self.subTest(text=text):
                self.assertEqual(jsonmend.loads(text), json.loads(text))

    def test_duplicate_keys_keep_last(self):
        self.assertEqual(jsonmend.loads('{"a": 1, "a": 2}'), {"a": 2})

    def test_load_from_file(self):
        data = {"name": "Ann", "tags": ["x", "y"], "score": 9.5}
        with tempfile.NamedTemporaryFile("w", suffix=".json", delete=False) as f:
            json.dump(data, f)
            path = f.name
        try:
            with open(path) as fp:
                self.assertEqual(jsonmend.load(fp), data)
        finally:
            os.unlink(path)

    def test_load_from_stream(self):
        self.assertEqual(jsonmend.load(io.StringIO("[1, 2, 3,]")), [1, 2, 3])


class TestRepairCompatibility(unittest.TestCase):
    """Test repair() output for input that is already valid."""

    def test_canonical_reserialization(self):
        for text in VALID_DOCUMENTS:
            with self.subTest(text=text):
                self.assertEqual(jsonmend.repair(text), canonical(text))

    def test_output_parses_with_json_module(self):
        for text in VALID_DOCUMENTS:
            with self.subTest(text=text):
                self.assertEqual(json.loads(jsonmend.repair(text)), json.loads(text))

    def test_floats_keep_python_formatting(self):
        self.assertEqual(jsonmend.repair("[1.0, 2.50]"), "[1.0,2.5]")

    def test_unicode_preserved(self):
        text = '{"jp": "日本語", "emoji": "\U0001F600"}'
        self.assertEqual(jsonmend.repair(text), '{"jp":"日本語","emoji":"\U0001F600"}')

    def test_encode_ascii_matches_json_module(self):
        text = '{"jp": "日本語", "emoji": "\U0001F600"}'
        self.assertEqual(
            jsonmend.repair(text, encode_ascii=True),
            json.dumps(json.loads(text), separators=(",", ":")),
        )


if __name__ == "__main__":
    unittest.main()
