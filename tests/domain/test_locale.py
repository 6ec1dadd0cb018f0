"""Unit tests for the locale table."""

import pytest

from vipdiscount.domain.exceptions import MissingTranslationError, ValidationError
from vipdiscount.domain.model.locale import LocaleTable


class TestTranslate:

    def test_plain_message(self):
        table = LocaleTable("en", {"greeting": "Hello"})
        assert table.translate("greeting") == "Hello"

    def test_placeholders_are_filled(self):
        table = LocaleTable("en", {"saving": "Save ${{amount}} ({{ pct }}%)"})
        assert table.translate("saving", amount="4.50", pct=15) == "Save $4.50 (15%)"

    def test_unknown_placeholder_left_as_is(self):
        table = LocaleTable("en", {"saving": "Save {{amount}}"})
        assert table.translate("saving") == "Save {{amount}}"

    def test_missing_key(self):
        table = LocaleTable("fr", {})
        with pytest.raises(MissingTranslationError, match="'fr' has no translation for 'nope'"):
            table.translate("nope")

    def test_contains(self):
        table = LocaleTable("en", {"a": "b"})
        assert "a" in table
        assert "z" not in table


class TestImmutability:

    def test_source_dict_changes_do_not_leak_in(self):
        source = {"greeting": "Hello"}
        table = LocaleTable("en", source)
        source["greeting"] = "Bonjour"
        assert table.translate("greeting") == "Hello"

    def test_messages_cannot_be_mutated(self):
        table = LocaleTable("en", {"greeting": "Hello"})
        with pytest.raises(TypeError):
            table.messages["greeting"] = "Hi"  # type: ignore[index]

    def test_non_string_values_rejected(self):
        with pytest.raises(ValidationError, match="must be a string"):
            LocaleTable("en", {"count": 3})  # type: ignore[dict-item]
