"""Tests for the JSON-file-backed customer store and locale loader."""

import json

import pytest

from vipdiscount.domain.exceptions import (
    CustomerLookupError,
    LocaleNotFoundError,
    ValidationError,
)
from vipdiscount.domain.model.customer import Customer
from vipdiscount.infrastructure.persistence.json_customer_repository import (
    JsonCustomerRepository,
)
from vipdiscount.infrastructure.persistence.json_locale_loader import load_locale


class TestJsonCustomerRepository:

    def test_missing_file_means_no_customers(self, tmp_path):
        path = tmp_path / "nested" / "customers.json"
        repo = JsonCustomerRepository(path)
        assert repo.get_by_id("1") is None
        assert not path.parent.exists()

    def test_unreadable_location(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        repo = JsonCustomerRepository(blocker / "data" / "customers.json")
        with pytest.raises(CustomerLookupError, match="Could not read customers"):
            repo.get_by_id("1")

    def test_reads_customers(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_text(
            json.dumps([{"id": "1", "tags": ["VIP"]}, {"id": "2"}]), encoding="utf-8"
        )
        repo = JsonCustomerRepository(path)
        assert repo.get_by_id("1") == Customer(id="1", tags=("VIP",))
        assert repo.get_by_id("2") == Customer(id="2", tags=())

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CustomerLookupError, match="Could not read customers"):
            JsonCustomerRepository(path).get_by_id("1")

    def test_malformed_record(self, tmp_path):
        path = tmp_path / "customers.json"
        path.write_text(json.dumps([{"tags": ["VIP"]}]), encoding="utf-8")
        with pytest.raises(CustomerLookupError, match="Malformed customer record"):
            JsonCustomerRepository(path).get_by_id("1")


class TestLoadLocale:

    def test_bundled_default_locale(self):
        table = load_locale()
        assert table.translate("discountMessage") == "VIP Discount"
        assert table.translate("errorNoCartLines") == "No cart lines found"
        assert "defaultHeading" in table
        assert "defaultDescription" in table

    def test_custom_directory(self, tmp_path):
        (tmp_path / "fr.json").write_text(
            json.dumps({"discountMessage": "Remise VIP"}), encoding="utf-8"
        )
        assert load_locale("fr", tmp_path).translate("discountMessage") == "Remise VIP"

    def test_unknown_locale(self, tmp_path):
        with pytest.raises(LocaleNotFoundError, match="'de'"):
            load_locale("de", tmp_path)

    def test_invalid_json(self, tmp_path):
        (tmp_path / "xx.json").write_text("nope", encoding="utf-8")
        with pytest.raises(ValidationError, match="not valid JSON"):
            load_locale("xx", tmp_path)

    def test_must_be_an_object(self, tmp_path):
        (tmp_path / "xx.json").write_text("[]", encoding="utf-8")
        with pytest.raises(ValidationError, match="JSON object"):
            load_locale("xx", tmp_path)
