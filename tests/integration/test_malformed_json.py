"""
Test cases for repairing malformed JSON commonly produced by LLMs and humans.
"""

import unittest

import jsonmend
from jsonmend import RecoveryExhausted, RecoveryOptions


class TestDocumentedRepairs(unittest.TestCase):
    """End-to-end repairs with their exact canonical output."""

    def test_unquoted_keys_and_trailing_comma(self) -> None:
        self.assertEqual(jsonmend.repair('{name: "Seb", age: 42,}'), '{"name":"Seb","age":42}')

    def test_unquoted_string_value(self) -> None:
        self.assertEqual(jsonmend.repair("{city: Paris}"), '{"city":"Paris"}')

    def test_unescaped_inner_quotes(self) -> None:
        self.assertEqual(
            jsonmend.repair('{"comment": "His name is "John"."}'),
            '{"comment":"His name is \\"John\\"."}',
        )

    def test_markdown_fence(self) -> None:
        text = "```json\n{name: Seb, age: 30,}\n```"
        self.assertEqual(jsonmend.repair(text, extract_json=True), '{"name":"Seb","age":30}')

    def test_markdown_fence_between_prose(self) -> None:
        text = "Hello, this is the JSON:\n\n```json\n{name: Seb, age: 30,}\n```\n\nThanks!"
        self.assertEqual(jsonmend.repair(text, extractJson=True), '{"name":"Seb","age":30}')

    def test_return_object(self) -> None:
        self.assertEqual(jsonmend.repair("{name: Seb}", returnObject=True), {"name": "Seb"})

    def test_encode_ascii(self) -> None:
        self.assertEqual(
            jsonmend.repair('{"greeting": "Café"}', encode_ascii=True),
            '{"greeting":"Caf\\u00e9"}',
        )

    def test_nan_becomes_null(self) -> None:
        self.assertEqual(jsonmend.repair("{value: NaN}"), '{"value":null}')

    def test_nested_unquoted_keys(self) -> None:
        self.assertEqual(
            jsonmend.repair("{user: {name: Seb, age: 30}}"),
            '{"user":{"name":"Seb","age":30}}',
        )

    def test_capitalized_literals(self) -> None:
        self.assertEqual(
            jsonmend.repair("{valid: True, deleted: Null, open: FALSE}"),
            '{"valid":true,"deleted":null,"open":false}',
        )

    def test_trailing_comma_in_array(self) -> None:
        self.assertEqual(jsonmend.repair('["a", "b", ]'), '["a","b"]')

    def test_line_break_inside_string(self) -> None:
        self.assertEqual(
            jsonmend.repair('{desc: "Line 1\nLine 2"}'), '{"desc":"Line 1\\nLine 2"}'
        )

    def test_missing_closing_brace(self) -> None:
        self.assertEqual(jsonmend.repair('{name: "Seb", age: 30'), '{"name":"Seb","age":30}')

    def test_safe_mode_does_not_balance(self) -> None:
        with self.assertRaises(RecoveryExhausted) as cm:
            jsonmend.repair('{name: "Seb"', safe_mode=True)
        self.assertEqual(str(cm.exception), "[jsonmend] Unable to repair invalid JSON.")


class TestRealWorldPatterns(unittest.TestCase):
    """Repairs of mixed problems in one document."""

    def test_comments_and_single_quotes(self) -> None:
        text = "{\n  // user id\n  id: 1, /* primary */\n  name: 'Ann',\n}"
        self.assertEqual(jsonmend.repair(text), '{"id":1,"name":"Ann"}')

    def test_python_style_dict(self) -> None:
        self.assertEqual(
            jsonmend.loads("{'ok': True, 'items': [1, 2, 3,]}"),
            {"ok": True, "items": [1, 2, 3]},
        )

    def test_javascript_number_literals(self) -> None:
        self.assertEqual(jsonmend.repair("[1, -Infinity, NaN, undefined]"), "[1,null,null,null]")

    def test_comment_markers_inside_strings_kept(self) -> None:
        self.assertEqual(
            jsonmend.repair('{url: "http://example.com/a"}'),
            '{"url":"http://example.com/a"}',
        )

    def test_truncated_array_of_objects(self) -> None:
        self.assertEqual(
            jsonmend.repair('[{"id": 1}, {"id": 2'), '[{"id":1},{"id":2}]'
        )

    def test_extra_closing_brace_is_dropped(self) -> None:
        self.assertEqual(jsonmend.repair('{"a": "b"}}'), '{"a":"b"}')
        self.assertEqual(jsonmend.repair("{a: b}}"), '{"a":"b"}')

    def test_inner_quotes_on_own_line(self) -> None:
        self.assertEqual(
            jsonmend.loads('[\n  {"q": "say "hi" now"}\n]'), [{"q": 'say "hi" now'}]
        )

    def test_prose_without_fence(self) -> None:
        text = 'Sure! Here is the data: {"a": [1, 2]} Let me know.'
        self.assertEqual(jsonmend.loads(text, extract_json=True), {"a": [1, 2]})

    def test_first_block_wins(self) -> None:
        text = "Result: [1, 2] and then {x: 1}"
        self.assertEqual(jsonmend.loads(text, extract_json=True), [1, 2])

    def test_prose_needs_extraction(self) -> None:
        with self.assertRaises(RecoveryExhausted):
            jsonmend.repair('Here: {"a": 1}')

    def test_safe_mode_still_normalizes(self) -> None:
        self.assertEqual(jsonmend.repair("{name: 'Seb',}", safe_mode=True), '{"name":"Seb"}')

    def test_llm_output_preset(self) -> None:
        text = "```json\n{answer: 'yes', score: NaN}\n```"
        self.assertEqual(
            jsonmend.repair(text, RecoveryOptions.llm_output()),
            '{"answer":"yes","score":null}',
        )

    def test_multi_word_bare_value_is_not_repaired(self) -> None:
        with self.assertRaises(RecoveryExhausted):
            jsonmend.repair("{city: New York}")


class TestIdempotence(unittest.TestCase):
    """Repairing repaired output gives the same output."""

    INPUTS = [
        '{name: "Seb", age: 42,}',
        "{city: Paris}",
        '{"comment": "His name is "John"."}',
        "{value: NaN}",
        "{valid: True, deleted: Null, open: FALSE}",
        '["a", "b", ]',
        '{desc: "Line 1\nLine 2"}',
        '{name: "Seb", age: 30',
        '{"greeting": "Café"}',
    ]

    def test_repair_is_idempotent(self) -> None:
        for text in self.INPUTS:
            with self.subTest(text=text):
                once = jsonmend.repair(text)
                self.assertEqual(jsonmend.repair(once), once)

    def test_encoded_output_is_idempotent(self) -> None:
        once = jsonmend.repair('{"emoji": "\U0001F600"}', encode_ascii=True)
        self.assertEqual(once, '{"emoji":"\\ud83d\\ude00"}')
        self.assertEqual(jsonmend.repair(once, encode_ascii=True), once)


if __name__ == "__main__":
    unittest.main()
