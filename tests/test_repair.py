"""Tests for JSON repair, lenient loading and compaction."""

import json
import unittest

from jsextract.decode.repair import compact_json, parse_lenient, repair_control_chars


class TestRepairControlChars(unittest.TestCase):

    def test_escapes_newline_tab_cr_inside_strings(self) -> None:
        text = '{"title": "line one\nline\ttwo\r"}'
        self.assertEqual(repair_control_chars(text), '{"title": "line one\\nline\\ttwo\\r"}')

    def test_leaves_control_chars_outside_strings(self) -> None:
        text = '{\n\t"a": 1\n}'
        self.assertEqual(repair_control_chars(text), text)

    def test_drops_other_control_chars_inside_strings(self) -> None:
        self.assertEqual(repair_control_chars('{"a": "x\x00y\x1fz\x7f"}'), '{"a": "xyz"}')

    def test_escape_pairs_do_not_toggle_strings(self) -> None:
        text = '{"a": "say \\"hi\nthere\\""}'
        self.assertEqual(repair_control_chars(text), '{"a": "say \\"hi\\nthere\\""}')

    def test_repaired_text_parses(self) -> None:
        repaired = repair_control_chars('{"d": "multi\nline"}')
        self.assertEqual(json.loads(repaired), {"d": "multi\nline"})

    def test_idempotent(self) -> None:
        samples = [
            '{"a": "x\ny"}',
            '{\n"b": "\t\x01"\n}',
            '["\\\\", "q\\"\n"]',
            "no json at all\n",
            '"unterminated \n',
        ]
        for text in samples:
            with self.subTest(text=text):
                once = repair_control_chars(text)
                self.assertEqual(repair_control_chars(once), once)


class TestParseLenient(unittest.TestCase):

    def test_valid_json(self) -> None:
        parsed = parse_lenient('{"a": [1, 2.5, null, true]}')
        assert parsed is not None
        self.assertEqual(parsed.value, {"a": [1, 2.5, None, True]})

    def test_json_null_is_a_value(self) -> None:
        parsed = parse_lenient("null")
        self.assertIsNotNone(parsed)
        assert parsed is not None
        self.assertIsNone(parsed.value)

    def test_retries_after_repair(self) -> None:
        parsed = parse_lenient('{"a": "one\ntwo"}')
        assert parsed is not None
        self.assertEqual(parsed.value, {"a": "one\ntwo"})

    def test_not_json_returns_none(self) -> None:
        self.assertIsNone(parse_lenient("someFunction()"))
        self.assertIsNone(parse_lenient("{key: 1}"))
        self.assertIsNone(parse_lenient(""))

    def test_non_standard_constants_rejected(self) -> None:
        self.assertIsNone(parse_lenient("NaN"))
        self.assertIsNone(parse_lenient("[Infinity]"))

    def test_nesting_past_recursion_limit_returns_none(self) -> None:
        self.assertIsNone(parse_lenient("[" * 100000 + "]" * 100000))


class TestCompactJson(unittest.TestCase):

    def test_compacts_and_sorts_keys(self) -> None:
        text = '\n{\n  "title": "Business Development Manager, Supply",\n  "company": "Acme Corp"\n}\n'
        self.assertEqual(
            compact_json(text),
            '{"company":"Acme Corp","title":"Business Development Manager, Supply"}',
        )

    def test_compacts_after_repair(self) -> None:
        self.assertEqual(compact_json('["First\nItem"]'), '["First\\nItem"]')

    def test_non_json_is_returned_unchanged(self) -> None:
        text = "  Hello World  \n"
        self.assertEqual(compact_json(text), text)
