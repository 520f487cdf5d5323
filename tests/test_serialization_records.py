"""Tests for serialization/records.py and serialization/document.py."""

from __future__ import annotations

import io
import tomllib

import pytest

from univtrans import PluralRule
from univtrans.diagnostics import ImportReadError, KeyNotStringError
from univtrans.serialization import (
    TranslationRecord,
    decode_records,
    load_document,
    parse_document,
    serialize_document,
)

# ============================================================================
# Records
# ============================================================================


class TestTranslationRecord:
    """Record field access and table conversion."""

    def test_form_access(self) -> None:
        record = TranslationRecord(locale="en", rule_type="cardinal", one="a", other="b")
        assert record.form(PluralRule.ONE) == "a"
        assert record.form(PluralRule.ZERO) == ""
        with pytest.raises(ValueError, match="no field"):
            record.form(PluralRule.UNKNOWN)

    def test_plural_forms_fixed_order(self) -> None:
        record = TranslationRecord(locale="ar", rule_type="cardinal", other="o", zero="z", few="f")
        assert list(record.plural_forms()) == [
            (PluralRule.ZERO, "z"),
            (PluralRule.FEW, "f"),
            (PluralRule.OTHER, "o"),
        ]

    def test_plain_table(self) -> None:
        record = TranslationRecord(locale="en", other="Hello")
        assert record.to_table() == {"locale": "en", "other": "Hello"}

    def test_plain_table_keeps_empty_other(self) -> None:
        assert TranslationRecord(locale="en").to_table() == {"locale": "en", "other": ""}

    def test_plural_table(self) -> None:
        record = TranslationRecord(
            locale="en", rule_type="cardinal", override=True, one="{0} day", other="{0} days"
        )
        assert record.to_table() == {
            "locale": "en",
            "override": True,
            "rule": "cardinal",
            "one": "{0} day",
            "other": "{0} days",
        }

    def test_explicit_plain_rule_omitted(self) -> None:
        record = TranslationRecord(locale="en", rule_type="Plain", other="x")
        assert "rule" not in record.to_table()


class TestFromTable:
    """Boundary validation of decoded entries."""

    def test_plain(self) -> None:
        record = TranslationRecord.from_table("k", {"locale": "en", "other": "Hi"})
        assert record == TranslationRecord(locale="en", other="Hi")

    def test_unknown_fields_ignored(self) -> None:
        record = TranslationRecord.from_table(
            "k", {"locale": "en", "other": "Hi", "comment": "for translators"}
        )
        assert record.other == "Hi"

    def test_unknown_rule_type_passes_through(self) -> None:
        record = TranslationRecord.from_table("k", {"locale": "en", "rule": "bogus", "other": "x"})
        assert record.rule_type == "bogus"

    def test_key_not_string(self) -> None:
        with pytest.raises(KeyNotStringError):
            TranslationRecord.from_table(7, {"locale": "en", "other": "x"})

    @pytest.mark.parametrize(
        ("table", "match"),
        [
            ("not a table", "must be a table"),
            ({"other": "x"}, "non-empty string 'locale'"),
            ({"locale": "", "other": "x"}, "non-empty string 'locale'"),
            ({"locale": 1, "other": "x"}, "non-empty string 'locale'"),
            ({"locale": "en", "override": "yes", "other": "x"}, "'override' must be a boolean"),
            ({"locale": "en", "rule": 3, "other": "x"}, "'rule' must be a string"),
            ({"locale": "en", "other": 5}, "'other' must be a string"),
            ({"locale": "en"}, "requires an 'other' field"),
            ({"locale": "en", "rule": "plain"}, "requires an 'other' field"),
            ({"locale": "en", "rule": "cardinal"}, "requires at least one plural form"),
            ({"locale": "en", "rule": "Range", "other": ""}, "requires at least one plural form"),
        ],
    )
    def test_malformed(self, table: object, match: str) -> None:
        with pytest.raises(ImportReadError, match=match):
            TranslationRecord.from_table("k", table)


# ============================================================================
# Documents
# ============================================================================

_DOCUMENT = """\
[greeting]
locale = "en"
other = "Hello, {0}!"

[days-left]
locale = "en"
rule = "cardinal"
one = "{0} day left"
other = "{0} days left"
"""


class TestParseDocument:
    """TOML parsing into records."""

    def test_parse_preserves_entry_order(self) -> None:
        records = parse_document(_DOCUMENT)
        assert list(records) == ["greeting", "days-left"]
        assert records["days-left"].one == "{0} day left"
        assert records["greeting"].rule_type == ""

    def test_parse_bytes(self) -> None:
        records = parse_document(_DOCUMENT.encode("utf-8"))
        assert records["greeting"].other == "Hello, {0}!"

    def test_invalid_utf8(self) -> None:
        with pytest.raises(ImportReadError) as exc_info:
            parse_document(b"\xff\xfe")
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_toml(self) -> None:
        with pytest.raises(ImportReadError) as exc_info:
            parse_document("[greeting\nlocale = ")
        assert isinstance(exc_info.value.__cause__, tomllib.TOMLDecodeError)
        assert exc_info.value.path is None

    def test_top_level_value_is_not_a_table(self) -> None:
        with pytest.raises(ImportReadError, match="must be a table"):
            parse_document('title = "x"\n')

    def test_load_stream(self) -> None:
        records = load_document(io.BytesIO(_DOCUMENT.encode("utf-8")))
        assert set(records) == {"greeting", "days-left"}

    def test_load_stream_invalid(self) -> None:
        with pytest.raises(ImportReadError):
            load_document(io.BytesIO(b"= broken"))

    def test_decode_records(self) -> None:
        records = decode_records({"k": {"locale": "lv", "other": "Sveiki"}})
        assert records == {"k": TranslationRecord(locale="lv", other="Sveiki")}


class TestSerializeDocument:
    """TOML writing."""

    def test_keys_sorted(self) -> None:
        text = serialize_document(
            {
                "zebra": TranslationRecord(locale="en", other="Z"),
                "apple": TranslationRecord(locale="en", other="A"),
            }
        )
        assert text.index("[apple]") < text.index("[zebra]")

    def test_output_parses_back(self) -> None:
        records = {
            "days-left": TranslationRecord(
                locale="en", rule_type="cardinal", one="{0} day left", other="{0} days left"
            ),
            "quote": TranslationRecord(locale="en", other='Say "hi"\n{0}'),
        }
        assert parse_document(serialize_document(records)) == records

    def test_empty(self) -> None:
        assert serialize_document({}) == ""
